"""
send tool.

Submit a single activity event (heartbeat) to TimeForged.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.models import Activity, EventAck, EventSubmission, EventType
from timeforged_mcp.tools.registry import (
    ToolOutput,
    as_tool_result,
    handle_backend_errors,
    register_tool,
)
from timeforged_mcp.utils.formatting import utc_isoformat
from timeforged_mcp.utils.language import infer_language


EVENTS_PATH = "/api/v1/events"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def build_event(
    entity: str,
    event_type: EventType = "file",
    activity: Activity = "coding",
    project: Optional[str] = None,
    language: Optional[str] = None,
) -> EventSubmission:
    """
    Build the event body, stamped with the current time.

    Language falls back to the entity's file extension and is left out
    when neither is available.
    """
    return EventSubmission(
        timestamp=utc_isoformat(_now()),
        event_type=event_type,
        entity=entity,
        activity=activity,
        project=project or None,
        language=language or infer_language(entity),
    )


@handle_backend_errors
async def send(
    client: TimeForgedClient,
    entity: str,
    event_type: EventType = "file",
    project: Optional[str] = None,
    language: Optional[str] = None,
    activity: Activity = "coding",
) -> ToolOutput:
    """Post one event and echo the backend's acknowledgement."""
    event = build_event(entity, event_type, activity, project, language)
    ack = EventAck.model_validate(await client.post_json(EVENTS_PATH, event.to_payload()))

    return ToolOutput(f"Event sent: id={ack.id}, entity={ack.entity}, type={ack.event_type}")


def register(mcp: FastMCP, client: TimeForgedClient) -> None:
    async def tf_send(
        entity: Annotated[str, Field(description="File path or entity name")],
        event_type: Annotated[EventType, Field(description="Event type")] = "file",
        project: Annotated[Optional[str], Field(description="Project name")] = None,
        language: Annotated[Optional[str], Field(description="Language")] = None,
        activity: Annotated[Activity, Field(description="Activity type")] = "coding",
    ) -> str:
        """
        Send an event/heartbeat to TimeForged.

        If language is omitted it is guessed from the entity's file extension.
        """
        return as_tool_result(await send(client, entity, event_type, project, language, activity))

    register_tool(mcp, "tf_send", "send", "Send an event/heartbeat to TimeForged", tf_send)
