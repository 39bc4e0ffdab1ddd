"""Session cache interface."""

from typing import Protocol

from extrol.core.entries import Entry
from extrol.core.session import Session, User


class SessionCache(Protocol):
    """Interface for durable storage of the session and prefetched entries."""

    def save(self, token: str, user: User) -> None:
        """Persist the token and user profile."""
        ...

    def load(self) -> Session | None:
        """Load the stored session. Returns None if absent or unreadable."""
        ...

    def clear(self) -> None:
        """Remove the stored session and any prefetched entries."""
        ...

    def take_prefetch(self) -> list[Entry] | None:
        """Return and delete the prefetched entry list, if any."""
        ...

    def stash_prefetch(self, entries: list[Entry]) -> None:
        """Store an entry list for the next take_prefetch."""
        ...
