"""
Notification Types

Request, response and result structures exchanged with the Notifer API.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

MIN_PRIORITY = 1
MAX_PRIORITY = 5
MAX_TAGS = 5


class DispatchState(Enum):
    """Stages of a single dispatch invocation."""
    IDLE = "idle"
    RESOLVING_CREDENTIAL = "resolving_credential"
    EXPANDING = "expanding"
    COMPOSING = "composing"
    BUILDING = "building"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"

    @property
    def terminal(self) -> bool:
        return self in (DispatchState.SUCCEEDED, DispatchState.FAILED, DispatchState.SKIPPED)


@dataclass
class NotificationRequest:
    """Normalized request sent to a topic."""

    topic: str
    message: str
    title: Optional[str] = None
    priority: int = 3
    tags: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the API; title and tags are omitted when empty."""
        payload: Dict[str, Any] = {"message": self.message}
        if self.title:
            payload["title"] = self.title
        payload["priority"] = self.priority
        if self.tags:
            payload["tags"] = list(self.tags)
        return payload


@dataclass
class NotificationResponse:
    """Message as accepted by the API."""

    id: str
    topic: str
    message: str
    priority: int
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NotificationResponse":
        tags = data.get("tags") or []
        return cls(
            id=str(data.get("id") or ""),
            topic=str(data.get("topic") or ""),
            message=str(data.get("message") or ""),
            priority=int(data.get("priority") or 0),
            tags=[str(t) for t in tags] if isinstance(tags, list) else [],
        )

    @classmethod
    def echo(cls, request: NotificationRequest) -> "NotificationResponse":
        """Stand-in built from the request when the reply body is unusable."""
        return cls(
            id="",
            topic=request.topic,
            message=request.message,
            priority=request.priority,
            tags=list(request.tags),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "topic": self.topic,
            "message": self.message,
            "priority": self.priority,
            "tags": list(self.tags),
        }

    def __str__(self) -> str:
        return f"NotificationResponse(id={self.id!r}, topic={self.topic!r}, priority={self.priority})"


@dataclass
class DispatchResult:
    """Outcome of one dispatch invocation."""

    state: DispatchState
    response: Optional[NotificationResponse] = None
    error: Optional[Exception] = None
    fail_on_error: bool = False
