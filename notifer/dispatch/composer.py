"""
Outcome Classifier & Composer

Decides whether an outcome is reported and fills in message, title and
priority when the step does not supply them.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from ..models.outcome import NotifyPolicy, Outcome
from ..models.step import AUTO_PRIORITY
from .payload import clamp_priority

# Failures demand the most attention, success the least
AUTO_PRIORITIES = {
    Outcome.SUCCESS: 2,
    Outcome.UNSTABLE: 3,
    Outcome.FAILURE: 5,
    Outcome.ABORTED: 1,
}

_VERBS = {
    Outcome.SUCCESS: "succeeded",
    Outcome.FAILURE: "failed",
    Outcome.UNSTABLE: "is unstable",
    Outcome.ABORTED: "was aborted",
}


@dataclass(frozen=True)
class ComposedNotification:
    """Message, title and priority after composition."""

    message: str
    title: Optional[str]
    priority: int


def should_notify(outcome: Outcome, policy: NotifyPolicy) -> bool:
    """Whether the policy enables notifications for this outcome."""
    return policy.enabled_for(outcome)


def priority_for_auto(outcome: Outcome) -> int:
    """Priority used when the step leaves it on auto."""
    return AUTO_PRIORITIES[outcome]


def default_title(outcome: Outcome) -> str:
    return f"Build {outcome.label}"


def default_message(outcome: Outcome, env: Mapping[str, str]) -> str:
    """
    Build a message from the outcome and the job identifiers in env.

    Uses JOB_NAME, BUILD_NUMBER and BUILD_URL when present, e.g.
    "deploy-api #42 failed" followed by the build URL on its own line.
    """
    job_name = (env.get("JOB_NAME") or "").strip()
    build_number = (env.get("BUILD_NUMBER") or "").strip()
    build_url = (env.get("BUILD_URL") or "").strip()

    if job_name and build_number:
        subject = f"{job_name} #{build_number}"
    elif job_name:
        subject = job_name
    elif build_number:
        subject = f"Build #{build_number}"
    else:
        subject = "Build"

    message = f"{subject} {_VERBS[outcome]}"
    if build_url:
        message = f"{message}\n{build_url}"
    return message


def compose(
    outcome: Outcome,
    env: Mapping[str, str],
    message: Optional[str] = None,
    title: Optional[str] = None,
    priority: int = AUTO_PRIORITY,
) -> ComposedNotification:
    """
    Fill in anything the step left out.

    Args:
        outcome: Build outcome
        env: Environment snapshot (for job identifiers)
        message: Explicit message, already expanded
        title: Explicit title, already expanded
        priority: Explicit priority, or AUTO_PRIORITY

    Returns:
        ComposedNotification with a non-empty message and a priority in 1..5
    """
    if not message or not message.strip():
        message = default_message(outcome, env)

    if not title or not title.strip():
        title = default_title(outcome)

    if priority == AUTO_PRIORITY:
        priority = priority_for_auto(outcome)
    else:
        priority = clamp_priority(priority)

    return ComposedNotification(message=message, title=title, priority=priority)
