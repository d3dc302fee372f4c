"""Payload Builder - Pure functions normalizing a notification request."""

from typing import Iterable, List, Optional

from ..models.notification import MAX_PRIORITY, MAX_TAGS, MIN_PRIORITY, NotificationRequest


def clamp_priority(priority: int) -> int:
    """Clamp priority into 1..5. Idempotent."""
    return max(MIN_PRIORITY, min(MAX_PRIORITY, int(priority)))


def normalize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """Strip tags, drop blanks and repeats, keep the first MAX_TAGS in order."""
    if not tags:
        return []
    cleaned = (str(t).strip() for t in tags)
    return list(dict.fromkeys(t for t in cleaned if t))[:MAX_TAGS]


def build(
    topic: str,
    message: str,
    title: Optional[str] = None,
    priority: int = 3,
    tags: Optional[Iterable[str]] = None,
) -> NotificationRequest:
    """
    Assemble the request sent to the API.

    Args:
        topic: Destination topic
        message: Composed message (non-empty)
        title: Optional title, dropped when blank
        priority: Priority, clamped into 1..5
        tags: Optional tags, see normalize_tags

    Returns:
        NotificationRequest
    """
    if title is not None and not title.strip():
        title = None

    return NotificationRequest(
        topic=topic,
        message=message,
        title=title,
        priority=clamp_priority(priority),
        tags=normalize_tags(tags),
    )
