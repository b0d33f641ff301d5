"""
status tool.

Check that the TimeForged daemon is up and report its version and counters.
"""

from fastmcp import FastMCP

from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.models import StatusReport
from timeforged_mcp.tools.registry import (
    ToolOutput,
    as_tool_result,
    handle_backend_errors,
    register_tool,
)


STATUS_PATH = "/api/v1/status"


@handle_backend_errors
async def status(client: TimeForgedClient) -> ToolOutput:
    """Fetch daemon status and render it as four lines."""
    data = StatusReport.model_validate(await client.get(STATUS_PATH))

    return ToolOutput("\n".join([
        f"Status: {data.status}",
        f"Version: {data.version}",
        f"Users: {data.user_count}",
        f"Events: {data.event_count}",
    ]))


def register(mcp: FastMCP, client: TimeForgedClient) -> None:
    async def tf_status() -> str:
        """
        Check TimeForged daemon status.

        Returns status, server version, number of users and number of stored events.
        """
        return as_tool_result(await status(client))

    register_tool(mcp, "tf_status", "status", "Check TimeForged daemon status", tf_status)
