"""
Tool result type, error handling decorator and registration helper.

Every tool is registered twice: under its canonical 'tf_' name and under
a short alias, sharing one function and one input schema.
"""

import inspect
import logging
from dataclasses import dataclass
from functools import wraps
from typing import Callable

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolOutput:
    """Rendered tool result."""

    text: str
    is_error: bool = False


def _error_output(func: Callable, error: Exception) -> ToolOutput:
    logger.warning(f"{func.__name__} failed: {error}")
    return ToolOutput(text=f"Error: {error}", is_error=True)


def handle_backend_errors(func: Callable) -> Callable:
    """
    Decorator turning any exception raised by a handler into an error result.

    Handlers never propagate: timeouts, HTTP failures and malformed responses
    all come back as ToolOutput("Error: <message>", is_error=True).

    Supports both sync and async functions.
    """
    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs) -> ToolOutput:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                return _error_output(func, e)
        return async_wrapper
    else:
        @wraps(func)
        def wrapper(*args, **kwargs) -> ToolOutput:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return _error_output(func, e)
        return wrapper


def as_tool_result(output: ToolOutput) -> str:
    """
    Convert a ToolOutput into what FastMCP expects from a tool function.

    Error results are raised as ToolError, which FastMCP reports to the host
    with isError set and the text unchanged.
    """
    if output.is_error:
        raise ToolError(output.text)
    return output.text


def register_tool(
    mcp: FastMCP,
    name: str,
    alias: str,
    description: str,
    fn: Callable[..., str],
) -> None:
    """
    Register fn under its canonical name and its alias.

    The input schema is derived from fn's signature, so both names
    expose identical arguments.
    """
    mcp.tool(name=name, description=description)(fn)
    mcp.tool(name=alias, description=f"{description} (alias)")(fn)
    logger.debug(f"Registered tool {name} (alias: {alias})")
