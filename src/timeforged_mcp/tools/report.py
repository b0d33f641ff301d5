"""
report tool.

Coding time summary for an arbitrary date range with optional filters.
"""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.models import RangeSummaryReport
from timeforged_mcp.tools.registry import (
    ToolOutput,
    as_tool_result,
    handle_backend_errors,
    register_tool,
)
from timeforged_mcp.utils.formatting import format_breakdown, format_duration


SUMMARY_PATH = "/api/v1/reports/summary"


@handle_backend_errors
async def report(
    client: TimeForgedClient,
    from_: Optional[str] = None,
    to: Optional[str] = None,
    project: Optional[str] = None,
    language: Optional[str] = None,
) -> ToolOutput:
    """
    Summarize tracked time for a range.

    Omitted parameters are not sent, the backend picks its own defaults.
    """
    data = RangeSummaryReport.model_validate(await client.get(SUMMARY_PATH, {
        "from": from_,
        "to": to,
        "project": project,
        "language": language,
    }))

    lines = [
        f"Total: {format_duration(data.total_seconds)}",
        f"Period: {data.start} → {data.end}",
    ]
    lines += format_breakdown("Projects", data.projects)
    lines += format_breakdown("Languages", data.languages)

    if data.days:
        lines += ["", "Daily:"]
        lines += [f"  {day.date}: {format_duration(day.total_seconds)}" for day in data.days]

    return ToolOutput("\n".join(lines))


def register(mcp: FastMCP, client: TimeForgedClient) -> None:
    async def tf_report(
        from_: Annotated[Optional[str], Field(
            alias="from",
            description="Start datetime (ISO 8601). Defaults to 7 days ago.",
        )] = None,
        to: Annotated[Optional[str], Field(
            description="End datetime (ISO 8601). Defaults to now.",
        )] = None,
        project: Annotated[Optional[str], Field(description="Filter by project name")] = None,
        language: Annotated[Optional[str], Field(description="Filter by language")] = None,
    ) -> str:
        """
        Get coding time summary for a date range.

        Returns the total, the period covered, per-project and per-language
        totals with percentages, and a per-day breakdown.
        """
        return as_tool_result(await report(client, from_, to, project, language))

    register_tool(
        mcp, "tf_report", "report", "Get coding time summary for a date range", tf_report
    )
