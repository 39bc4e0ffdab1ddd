"""Functional core - pure business logic with no I/O."""

from .entries import Entry, EntryDraft, ValidationError, validate_draft, find_entry
from .projection import (
    SORT_KEYS,
    DEFAULT_SORT,
    Projection,
    Stats,
    compute_stats,
    filter_entries,
    format_currency,
    project,
    sort_entries,
)
from .session import Session, User

__all__ = [
    # Entries
    "Entry",
    "EntryDraft",
    "ValidationError",
    "validate_draft",
    "find_entry",
    # Projection
    "SORT_KEYS",
    "DEFAULT_SORT",
    "Projection",
    "Stats",
    "compute_stats",
    "filter_entries",
    "format_currency",
    "project",
    "sort_entries",
    # Session
    "Session",
    "User",
]
