"""Helpers - Pure utility functions with no side effects."""

from .expand import (
    expand,
    expand_all,
    find_unresolved,
    snapshot_environment,
    PLACEHOLDER_PATTERN,
)

__all__ = [
    'expand',
    'expand_all',
    'find_unresolved',
    'snapshot_environment',
    'PLACEHOLDER_PATTERN',
]
