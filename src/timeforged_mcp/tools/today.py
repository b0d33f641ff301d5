"""
today tool.

Coding time summary from local midnight until now.
"""

from datetime import datetime, time

from fastmcp import FastMCP

from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.models import SummaryReport
from timeforged_mcp.tools.registry import (
    ToolOutput,
    as_tool_result,
    handle_backend_errors,
    register_tool,
)
from timeforged_mcp.utils.formatting import format_breakdown, format_duration, utc_isoformat


SUMMARY_PATH = "/api/v1/reports/summary"


def _now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def today_range(now: datetime) -> tuple[str, str]:
    """
    Start of the local day and now, both as UTC ISO strings.

    Midnight takes its own UTC offset, which differs from now's on DST change days.
    """
    start_of_day = datetime.combine(now.date(), time()).astimezone()
    return utc_isoformat(start_of_day), utc_isoformat(now)


@handle_backend_errors
async def today(client: TimeForgedClient) -> ToolOutput:
    """Summarize today's tracked time with project and language breakdowns."""
    start, end = today_range(_now())
    data = SummaryReport.model_validate(
        await client.get(SUMMARY_PATH, {"from": start, "to": end})
    )

    lines = [f"Today: {format_duration(data.total_seconds)}"]
    lines += format_breakdown("Projects", data.projects)
    lines += format_breakdown("Languages", data.languages)

    return ToolOutput("\n".join(lines))


def register(mcp: FastMCP, client: TimeForgedClient) -> None:
    async def tf_today() -> str:
        """
        Get today's coding time summary.

        Covers local midnight until now, with per-project and per-language totals.
        """
        return as_tool_result(await today(client))

    register_tool(mcp, "tf_today", "today", "Get today's coding time summary", tf_today)
