"""Entry repository interface."""

from typing import Protocol

from extrol.core.entries import Entry, EntryDraft


class EntryRepository(Protocol):
    """Interface for the remote entry store."""

    async def list(self) -> list[Entry]:
        """Fetch every entry for the current session."""
        ...

    async def create(self, draft: EntryDraft) -> Entry:
        """Create an entry. The server assigns the id."""
        ...

    async def update(self, entry_id: str, draft: EntryDraft) -> Entry:
        """Replace date, price and note of an entry."""
        ...

    async def remove(self, entry_id: str) -> None:
        """Delete an entry."""
        ...
