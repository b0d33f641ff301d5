"""
TimeForged MCP Server.

FastMCP server exposing TimeForged tools over stdio.

Tools (5, each with a short alias):
- tf_status / status: daemon health and counters
- tf_today / today: today's coding time
- tf_report / report: coding time for a date range
- tf_sessions / sessions: coding sessions
- tf_send / send: submit an event/heartbeat
"""

import logging
import sys
from typing import Optional

from fastmcp import FastMCP

from timeforged_mcp import __version__
from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.settings import Settings
from timeforged_mcp.tools import register_all


INSTRUCTIONS = """TimeForged time tracking integration.

TOOLS (each also available under its short alias):
- tf_status (status): Check daemon status
- tf_today (today): Today's coding time by project and language
- tf_report (report): Summary for a range. from/to are ISO 8601, default last 7 days
- tf_sessions (sessions): Coding sessions, optional from/to/project filters
- tf_send (send): Record an event. entity is required, language is guessed from extension

TIME FORMAT: '2024-12-15T10:00:00Z'"""


logger = logging.getLogger(__name__)


def create_server(settings: Settings, client: Optional[TimeForgedClient] = None) -> FastMCP:
    """
    Build the MCP server with all tools registered.

    Args:
        settings: Process settings, read once at startup
        client: Backend client (built from settings if not given)
    """
    if client is None:
        client = TimeForgedClient(settings)

    mcp = FastMCP(name="timeforged", version=__version__, instructions=INSTRUCTIONS)
    register_all(mcp, client)
    return mcp


def configure_logging(settings: Settings) -> None:
    """Log to stderr; stdout carries the MCP stream."""
    logging.basicConfig(
        stream=sys.stderr,
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def serve(settings: Optional[Settings] = None) -> None:
    """Run MCP server over stdio."""
    if settings is None:
        settings = Settings()

    configure_logging(settings)
    settings.warn_if_unauthenticated()
    logger.info(f"Using TimeForged server at {settings.server_url}")

    mcp = create_server(settings)
    mcp.run()


if __name__ == "__main__":
    serve()
