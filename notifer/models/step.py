"""
Step Parameters

Per-call parameters for the notify step, validated once at construction.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..errors import CompositionError
from .notification import MIN_PRIORITY
from .outcome import NotifyPolicy

AUTO_PRIORITY = 0

# Named priorities accepted in place of numbers
PRIORITY_NAMES = {
    "auto": AUTO_PRIORITY,
    "min": 1,
    "low": 2,
    "default": 3,
    "high": 4,
    "max": 5,
    "urgent": 5,
}


def parse_priority(value: Union[int, str, None]) -> int:
    """
    Interpret an explicit priority.

    Numbers are truncated to whole values and otherwise returned as-is
    (clamping happens later). None and "auto"
    mean the outcome decides.

    Raises:
        CompositionError: if the value is neither a number nor a known name
    """
    if value is None:
        return AUTO_PRIORITY
    if isinstance(value, bool):
        raise CompositionError(f"Invalid priority: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _whole(value)
    text = str(value).strip().lower()
    if not text:
        return AUTO_PRIORITY
    if text in PRIORITY_NAMES:
        return PRIORITY_NAMES[text]
    try:
        number = float(text)
    except ValueError:
        raise CompositionError(f"Invalid priority: {value!r}") from None
    return _whole(number)


def _whole(number: float) -> int:
    # nan and inf cannot be clamped
    try:
        whole = int(number)
    except (OverflowError, ValueError):
        raise CompositionError(f"Invalid priority: {number!r}") from None
    # only an exact zero means auto
    if whole == AUTO_PRIORITY and number:
        return MIN_PRIORITY
    return whole


@dataclass
class NotifyStepParams:
    """
    Parameters of a single notify step.

    Args:
        credentials_id: Id of the credential holding the topic token (required)
        topic: Destination topic, may contain ${VAR} placeholders (required)
        message: Message body; synthesized from the outcome when empty
        title: Title; synthesized from the outcome when empty
        priority: 1-5, a name such as "high", or 0/"auto" for outcome-based
        tags: Up to 5 tags, extras are dropped
        fail_on_error: Raise on delivery failure instead of logging it
        policy: Per-outcome enable flags
    """

    credentials_id: str
    topic: str
    message: Optional[str] = None
    title: Optional[str] = None
    priority: Union[int, str, None] = AUTO_PRIORITY
    tags: Optional[List[str]] = None
    fail_on_error: bool = False
    policy: NotifyPolicy = field(default_factory=NotifyPolicy)

    def __post_init__(self):
        self.credentials_id = (self.credentials_id or "").strip()
        self.topic = (self.topic or "").strip()
        if not self.credentials_id:
            raise ValueError("Credentials are required")
        if not self.topic:
            raise ValueError("Topic is required")
        self.priority = parse_priority(self.priority)
        if self.tags is not None:
            self.tags = [str(t) for t in self.tags]
