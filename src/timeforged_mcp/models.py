"""
Pydantic models for TimeForged request and response payloads.

Responses are validated on the way in so a malformed payload surfaces as
a tool error rather than a half-rendered report.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


EventType = Literal["file", "terminal", "browser", "meeting", "custom"]

Activity = Literal[
    "coding",
    "browsing",
    "debugging",
    "building",
    "communicating",
    "designing",
    "other",
]


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class StatusReport(_Payload):
    """GET /api/v1/status"""

    status: str
    version: str
    user_count: int
    event_count: int


class BreakdownEntry(_Payload):
    """One project or language line of a summary."""

    name: str
    total_seconds: int
    # Backend-computed, not clamped
    percent: float


class DayTotal(_Payload):
    date: str
    total_seconds: int


class SummaryReport(_Payload):
    """GET /api/v1/reports/summary"""

    total_seconds: int
    start: Optional[str] = Field(default=None, alias="from")
    end: Optional[str] = Field(default=None, alias="to")
    projects: list[BreakdownEntry] = Field(default_factory=list)
    languages: list[BreakdownEntry] = Field(default_factory=list)
    days: list[DayTotal] = Field(default_factory=list)


class RangeSummaryReport(SummaryReport):
    """Summary for an explicit range; the backend always echoes the period."""

    start: str = Field(alias="from")
    end: str = Field(alias="to")


class SessionRecord(_Payload):
    """One entry of GET /api/v1/reports/sessions"""

    start: str
    end: str
    duration_seconds: int
    project: Optional[str] = None
    event_count: int


class EventSubmission(_Payload):
    """POST /api/v1/events body."""

    timestamp: str
    event_type: EventType = "file"
    entity: str
    activity: Activity = "coding"
    project: Optional[str] = None
    language: Optional[str] = None
    metadata: dict[str, str] = Field(default_factory=lambda: {"source": "mcp"})

    def to_payload(self) -> dict:
        """JSON body with absent optional fields left out."""
        return self.model_dump(exclude_none=True)


class EventAck(_Payload):
    """POST /api/v1/events response."""

    id: int
    timestamp: str
    event_type: str
    entity: str
