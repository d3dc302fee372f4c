"""Notifer - build notifications for CI pipelines.

This package sends the outcome of a build to a Notifer topic.

Modules:
    models - Data models (dataclasses and enums)
    credentials - Credential stores and the token resolver
    helpers - Pure utility functions (variable expansion)
    dispatch - Composition, payload building and the dispatch orchestrator
    api - Notifer API client
    monitoring - Dispatch tracking and Sentry integration
    config - Configuration
"""

from .config import DispatchConfig
from .errors import (
    CompositionError,
    CredentialNotFound,
    DispatchError,
    ExpansionError,
    HTTPStatusError,
    NetworkError,
    NotiferError,
    TransportError,
)
from .models import NotifyPolicy, NotifyStepParams, Outcome
from .dispatch import NotificationDispatcher, notify

__all__ = [
    'DispatchConfig',
    'CompositionError',
    'CredentialNotFound',
    'DispatchError',
    'ExpansionError',
    'HTTPStatusError',
    'NetworkError',
    'NotiferError',
    'TransportError',
    'NotifyPolicy',
    'NotifyStepParams',
    'Outcome',
    'NotificationDispatcher',
    'notify',
]

__version__ = '1.0.0'
