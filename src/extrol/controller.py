"""Command interface between the UI layer and the core.

The UI calls login/logout, set_search/set_sort, submit_* and refresh. The
controller calls back into the View to render, navigate and report errors.
"""

import logging
from typing import Awaitable, Callable, TypeVar

from .adapters.api_client import EntryClientError, ExtrolAPIAdapter, RemoteError
from .adapters.file_cache import FileSessionCache
from .config import Config, load_config
from .core.entries import Entry, EntryDraft, ValidationError
from .core.projection import DEFAULT_SORT, Projection, project
from .core.session import User
from .ports import EntryRepository, View
from .session import SessionManager
from .store import EntryStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

NOT_SIGNED_IN = "Not signed in"


class ExtrolController:
    """Owns the session, the entry store and the view parameters."""

    def __init__(
        self,
        repository: EntryRepository,
        session: SessionManager,
        view: View,
        default_sort: str = DEFAULT_SORT,
    ):
        self.session = session
        self.view = view
        self.default_sort = default_sort
        self.search = ""
        self.sort_key = default_sort
        self.store = EntryStore(repository, on_change=self.render)

    @classmethod
    def from_config(cls, view: View, config: Config | None = None) -> "ExtrolController":
        """Wire the file cache and HTTP adapter from configuration."""
        config = config or load_config()
        session = SessionManager(FileSessionCache(config.cache_path), view)
        repository = ExtrolAPIAdapter(lambda: session.token, config)
        return cls(repository, session, view, default_sort=config.default_sort)

    # ============== Session ==============

    async def start(self) -> bool:
        """Restore a cached session and hydrate the store. False if signed out."""
        if not self.session.restore():
            return False
        prefetch = self.session.take_prefetch()
        await self._perform(self.store.hydrate, prefetch)
        return True

    async def login(self, token: str, user: User, prefetch: list[Entry] | None = None) -> bool:
        """Start a new session and load its entries."""
        self._reset_state()
        self.session.login(token, user)
        return bool(await self._perform(self.store.hydrate, prefetch))

    def logout(self) -> None:
        self._reset_state()
        self.session.logout()

    def remember_entries(self) -> None:
        """Cache the current entries so the next start can show them before the network answers."""
        if self.session.is_authenticated:
            self.session.cache.stash_prefetch(self.store.entries)

    def _reset_state(self) -> None:
        self.store.reset()
        self.search = ""
        self.sort_key = self.default_sort

    # ============== View parameters ==============

    def set_search(self, text: str) -> Projection:
        self.search = text or ""
        return self.render()

    def set_sort(self, key: str) -> Projection:
        self.sort_key = key
        return self.render()

    def render(self) -> Projection:
        """Recompute the projection and hand it to the view."""
        projection = project(self.store.entries, self.search, self.sort_key)
        self.view.render_list(projection.entries, projection.stats)
        return projection

    # ============== Entries ==============

    async def refresh(self) -> bool:
        return bool(await self._perform(self.store.load))

    async def submit_create(self, draft: EntryDraft) -> bool:
        entry = await self._perform(self.store.create, draft)
        if entry is None:
            return False
        self.view.show_message("Entry added successfully")
        return True

    async def submit_update(self, entry_id: str, draft: EntryDraft) -> bool:
        entry = await self._perform(self.store.update, entry_id, draft)
        if entry is None:
            return False
        self.view.show_message("Entry updated successfully")
        return True

    async def submit_delete(self, entry_id: str) -> bool:
        """Delete an entry. The caller is responsible for asking the user first."""
        if not await self._perform(self.store.remove, entry_id):
            return False
        self.view.show_message("Entry deleted successfully")
        return True

    async def _perform(self, action: Callable[..., Awaitable[T]], *args) -> T | None:
        """
        Run a store operation and route any failure to the view.

        Returns None when the operation failed or its session has ended.
        """
        if not self.session.is_authenticated:
            self.view.show_error(NOT_SIGNED_IN)
            return None

        generation = self.session.generation
        try:
            return await action(*args)
        except ValidationError as e:
            self.view.show_error(str(e))
        except EntryClientError as e:
            if generation != self.session.generation:
                logger.debug(f"Ignoring error from a previous session: {e.message}")
                return None
            self.view.show_error(e.message)
            if isinstance(e, RemoteError) and e.is_unauthorized:
                logger.info("Server rejected the session token")
                self.logout()
        return None
