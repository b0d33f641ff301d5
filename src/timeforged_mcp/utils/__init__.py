"""
Formatting and language detection helpers.
"""

from timeforged_mcp.utils.formatting import (
    build_query,
    format_breakdown,
    format_duration,
    format_percent,
    utc_isoformat,
)
from timeforged_mcp.utils.language import infer_language

__all__ = [
    "format_duration",
    "format_percent",
    "format_breakdown",
    "build_query",
    "utc_isoformat",
    "infer_language",
]
