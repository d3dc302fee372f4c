"""Parameter checks for the notify step, reported as errors and warnings."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from ..errors import CompositionError
from ..models.notification import MAX_PRIORITY, MAX_TAGS, MIN_PRIORITY
from ..models.step import AUTO_PRIORITY, parse_priority

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    level: str
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.level.upper()} {self.field}: {self.message}"


def validate_step(
    credentials_id: Optional[str],
    topic: Optional[str],
    message: Optional[str] = None,
    priority: Union[int, str, None] = AUTO_PRIORITY,
    tags: Optional[Sequence[str]] = None,
) -> List[ValidationIssue]:
    """
    Check raw step parameters without constructing NotifyStepParams.

    Returns:
        Issues found, errors first; empty when everything is fine
    """
    issues: List[ValidationIssue] = []

    if not (credentials_id or "").strip():
        issues.append(ValidationIssue(ERROR, "credentials_id", "Credentials are required"))

    if not (topic or "").strip():
        issues.append(ValidationIssue(ERROR, "topic", "Topic is required"))

    try:
        value = parse_priority(priority)
    except CompositionError as e:
        issues.append(ValidationIssue(ERROR, "priority", str(e)))
    else:
        if value != AUTO_PRIORITY and not MIN_PRIORITY <= value <= MAX_PRIORITY:
            issues.append(ValidationIssue(
                WARNING, "priority",
                f"Priority should be between {MIN_PRIORITY} and {MAX_PRIORITY}, {value} will be clamped",
            ))

    if message is not None and not message.strip():
        issues.append(ValidationIssue(
            WARNING, "message", "Message is blank, a message will be generated from the build outcome",
        ))

    if tags and len([t for t in tags if str(t).strip()]) > MAX_TAGS:
        issues.append(ValidationIssue(
            WARNING, "tags", f"Only the first {MAX_TAGS} tags are sent",
        ))

    issues.sort(key=lambda issue: issue.level != ERROR)
    return issues


def has_errors(issues: Sequence[ValidationIssue]) -> bool:
    return any(issue.level == ERROR for issue in issues)
