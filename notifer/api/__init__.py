"""API layer - External API communication."""

from .client import NotificationTransport, NotiferClient, MockNotiferClient, TOKEN_HEADER

__all__ = [
    'NotificationTransport',
    'NotiferClient',
    'MockNotiferClient',
    'TOKEN_HEADER',
]
