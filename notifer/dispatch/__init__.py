"""Dispatch - composition, payload building and orchestration."""

from .composer import (
    ComposedNotification,
    compose,
    default_message,
    default_title,
    priority_for_auto,
    should_notify,
)
from .payload import build, clamp_priority, normalize_tags
from .orchestrator import LOG_PREFIX, NotificationDispatcher, notify
from .validation import ValidationIssue, has_errors, validate_step

__all__ = [
    'ComposedNotification',
    'compose',
    'default_message',
    'default_title',
    'priority_for_auto',
    'should_notify',
    'build',
    'clamp_priority',
    'normalize_tags',
    'LOG_PREFIX',
    'NotificationDispatcher',
    'notify',
    'ValidationIssue',
    'has_errors',
    'validate_step',
]
