"""Entry store - the in-memory entries of the current session."""

import logging
from typing import Callable

from .core.entries import Entry, EntryDraft, find_entry, validate_draft
from .ports import EntryRepository

logger = logging.getLogger(__name__)


class EntryStore:
    """
    Authoritative local copy of the session's entries.

    Mutations are applied only after the repository confirms them. `reset()`
    advances `epoch`; a request that completes under a newer epoch is dropped.
    """

    def __init__(self, repository: EntryRepository, on_change: Callable[[], None] | None = None):
        self._repository = repository
        self._on_change = on_change or (lambda: None)
        self._entries: list[Entry] = []
        self.epoch = 0

    @property
    def entries(self) -> list[Entry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Entry | None:
        return find_entry(self._entries, entry_id)

    def adopt(self, entries: list[Entry]) -> None:
        """Replace the store wholesale."""
        self._entries = list(entries)
        self._on_change()

    def reset(self) -> None:
        self._entries = []
        self.epoch += 1

    def _is_stale(self, epoch: int, action: str) -> bool:
        if epoch != self.epoch:
            logger.debug(f"Discarding {action} result from a previous session")
            return True
        return False

    async def load(self) -> bool:
        """Replace the store with the server's list."""
        epoch = self.epoch
        entries = await self._repository.list()
        if self._is_stale(epoch, "load"):
            return False
        logger.debug(f"Loaded {len(entries)} entries")
        self.adopt(entries)
        return True

    async def hydrate(self, prefetch: list[Entry] | None = None) -> bool:
        """
        Populate the store for a new session.

        A prefetched list is shown right away; the server list always follows
        and replaces it.
        """
        if prefetch is not None:
            logger.debug(f"Adopting {len(prefetch)} prefetched entries")
            self.adopt(prefetch)
        return await self.load()

    async def create(self, draft: EntryDraft) -> Entry | None:
        """Create an entry and append it once the server confirms."""
        draft = validate_draft(draft)
        epoch = self.epoch
        entry = await self._repository.create(draft)
        if self._is_stale(epoch, "create"):
            return None
        self._entries.append(entry)
        self._on_change()
        return entry

    async def update(self, entry_id: str, draft: EntryDraft) -> Entry | None:
        """Replace an entry's fields once the server confirms."""
        draft = validate_draft(draft)
        epoch = self.epoch
        entry = await self._repository.update(entry_id, draft)
        if self._is_stale(epoch, "update"):
            return None
        for i, existing in enumerate(self._entries):
            if existing.id == entry_id:
                self._entries[i] = entry
                self._on_change()
                break
        else:
            logger.warning(f"Updated entry {entry_id} is not in the local store")
        return entry

    async def remove(self, entry_id: str) -> bool:
        """Delete an entry once the server confirms."""
        epoch = self.epoch
        await self._repository.remove(entry_id)
        if self._is_stale(epoch, "delete"):
            return False
        self._entries = [e for e in self._entries if e.id != entry_id]
        self._on_change()
        return True
