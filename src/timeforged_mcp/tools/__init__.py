"""
TimeForged tools.

Five tools, each registered under a canonical name and an alias:
- tf_status / status: daemon status
- tf_today / today: today's summary
- tf_report / report: summary for a date range
- tf_sessions / sessions: coding sessions
- tf_send / send: submit an event
"""

from fastmcp import FastMCP

from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.tools import report, send, sessions, status, today
from timeforged_mcp.tools.registry import ToolOutput, register_tool


# Registration order is fixed
TOOL_MODULES = [status, today, report, sessions, send]


def register_all(mcp: FastMCP, client: TimeForgedClient) -> None:
    """Register every tool and its alias on the server."""
    for module in TOOL_MODULES:
        module.register(mcp, client)


__all__ = [
    "ToolOutput",
    "register_tool",
    "register_all",
    "TOOL_MODULES",
]
