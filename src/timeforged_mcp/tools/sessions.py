"""
sessions tool.

List coding sessions detected by the backend.
"""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field, TypeAdapter

from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.models import SessionRecord
from timeforged_mcp.tools.registry import (
    ToolOutput,
    as_tool_result,
    handle_backend_errors,
    register_tool,
)
from timeforged_mcp.utils.formatting import format_duration


SESSIONS_PATH = "/api/v1/reports/sessions"

_sessions_adapter = TypeAdapter(list[SessionRecord])


def format_session(index: int, session: SessionRecord) -> str:
    """'1. <start> → <end> (<duration>, <n> events) [project]'"""
    line = (
        f"{index}. {session.start} → {session.end} "
        f"({format_duration(session.duration_seconds)}, {session.event_count} events)"
    )
    if session.project:
        line += f" [{session.project}]"
    return line


@handle_backend_errors
async def sessions(
    client: TimeForgedClient,
    from_: Optional[str] = None,
    to: Optional[str] = None,
    project: Optional[str] = None,
) -> ToolOutput:
    """List sessions in backend order, numbered from 1."""
    records = _sessions_adapter.validate_python(await client.get(SESSIONS_PATH, {
        "from": from_,
        "to": to,
        "project": project,
    }))

    if not records:
        return ToolOutput("No sessions found.")

    lines = [f"Sessions ({len(records)}):"]
    lines += [format_session(i, s) for i, s in enumerate(records, start=1)]

    return ToolOutput("\n".join(lines))


def register(mcp: FastMCP, client: TimeForgedClient) -> None:
    async def tf_sessions(
        from_: Annotated[Optional[str], Field(
            alias="from", description="Start datetime (ISO 8601)",
        )] = None,
        to: Annotated[Optional[str], Field(description="End datetime (ISO 8601)")] = None,
        project: Annotated[Optional[str], Field(description="Filter by project name")] = None,
    ) -> str:
        """
        List coding sessions.

        Each line shows start, end, duration, event count and project if any.
        """
        return as_tool_result(await sessions(client, from_, to, project))

    register_tool(mcp, "tf_sessions", "sessions", "List coding sessions", tf_sessions)
