"""
TimeForged REST API client and errors.
"""

from timeforged_mcp.api.client import (
    BackendConnectionError,
    BackendError,
    BackendHTTPError,
    BackendTimeoutError,
    TimeForgedClient,
)

__all__ = [
    "TimeForgedClient",
    "BackendError",
    "BackendTimeoutError",
    "BackendHTTPError",
    "BackendConnectionError",
]
