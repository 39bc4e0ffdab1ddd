"""Ports - interfaces/protocols for external dependencies."""

from .entry_repo import EntryRepository
from .session_cache import SessionCache
from .view import View

__all__ = [
    "EntryRepository",
    "SessionCache",
    "View",
]
