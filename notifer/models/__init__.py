"""Data models (dataclasses and enums)."""

from .outcome import Outcome, NotifyPolicy
from .notification import (
    DispatchResult,
    DispatchState,
    NotificationRequest,
    NotificationResponse,
    MAX_PRIORITY,
    MAX_TAGS,
    MIN_PRIORITY,
)
from .step import AUTO_PRIORITY, NotifyStepParams, parse_priority

__all__ = [
    'Outcome',
    'NotifyPolicy',
    'DispatchResult',
    'DispatchState',
    'NotificationRequest',
    'NotificationResponse',
    'MAX_PRIORITY',
    'MAX_TAGS',
    'MIN_PRIORITY',
    'AUTO_PRIORITY',
    'NotifyStepParams',
    'parse_priority',
]
