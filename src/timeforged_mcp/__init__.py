"""
TimeForged MCP server.

Exposes TimeForged time tracking reports and event submission as MCP tools.
"""

__version__ = "0.1.0"
