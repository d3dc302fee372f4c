"""
Monitoring for the Notifer dispatch engine

Provides:
- Dispatch state tracking with slow-stage warnings
- Sentry error tracking with dispatch context
"""

from .tracker import DispatchTracker
from .sentry import (
    init_sentry,
    set_dispatch_context,
    add_breadcrumb,
    capture_exception,
)

__all__ = [
    'DispatchTracker',
    'init_sentry',
    'set_dispatch_context',
    'add_breadcrumb',
    'capture_exception',
]
