"""Extrol API adapter - HTTP client for entry CRUD."""

import asyncio
import logging
from typing import Callable

import requests

from extrol.config import Config, load_config
from extrol.core.entries import Entry, EntryDraft

logger = logging.getLogger(__name__)

ENTRIES_PATH = "/api/entries"

# Operation kinds, each with its own fallback messages
LOAD = "load"
CREATE = "create"
UPDATE = "update"
DELETE = "delete"

FALLBACK_MESSAGES = {
    LOAD: "Failed to load entries",
    CREATE: "Save failed",
    UPDATE: "Update failed",
    DELETE: "Delete failed",
}

NETWORK_MESSAGES = {
    LOAD: "Network error loading entries",
    CREATE: "Network error saving entry",
    UPDATE: "Network error saving entry",
    DELETE: "Network error deleting entry",
}


class EntryClientError(Exception):
    """Base class for entry request failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RemoteError(EntryClientError):
    """The server answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401


class NetworkError(EntryClientError):
    """The server could not be reached."""

    pass


class ExtrolAPIAdapter:
    """
    Extrol API adapter.

    Implements EntryRepository protocol. Attaches the bearer token supplied by
    token_provider and normalizes failures into RemoteError / NetworkError.
    No business logic - just I/O.
    """

    def __init__(
        self,
        token_provider: Callable[[], str | None],
        config: Config | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or load_config()
        self._token_provider = token_provider
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, path: str, op: str, payload: dict | None = None):
        """Make an authenticated API request. Returns the status code and decoded JSON body."""
        url = f"{self.config.api_base}{path}"
        logger.debug(f"{method} {url}")
        try:
            resp = self._session.request(
                method,
                url,
                headers=self._headers(),
                json=payload,
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise NetworkError(NETWORK_MESSAGES[op]) from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if not resp.ok:
            message = FALLBACK_MESSAGES[op]
            if isinstance(data, dict) and data.get("error"):
                message = str(data["error"])
            logger.info(f"{method} {url} returned {resp.status_code}: {message}")
            raise RemoteError(message, resp.status_code)

        return resp.status_code, data

    def _decode_entry(self, data, op: str, status_code: int) -> Entry:
        """Build an Entry from a success body, or fail the operation."""
        try:
            return Entry.from_api(data)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Malformed entry in {op} response: {e}")
            raise RemoteError(FALLBACK_MESSAGES[op], status_code) from e

    def _list(self) -> list[Entry]:
        _, data = self._request("GET", ENTRIES_PATH, LOAD)
        if not isinstance(data, list):
            return []
        entries = []
        for item in data:
            try:
                entries.append(Entry.from_api(item))
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed entry {item!r}: {e}")
        return entries

    def _create(self, draft: EntryDraft) -> Entry:
        status_code, data = self._request("POST", ENTRIES_PATH, CREATE, draft.to_payload())
        return self._decode_entry(data, CREATE, status_code)

    def _update(self, entry_id: str, draft: EntryDraft) -> Entry:
        status_code, data = self._request("PUT", f"{ENTRIES_PATH}/{entry_id}", UPDATE, draft.to_payload())
        body = data if isinstance(data, dict) else {}
        return self._decode_entry({"id": entry_id, **draft.to_payload(), **body}, UPDATE, status_code)

    def _remove(self, entry_id: str) -> None:
        self._request("DELETE", f"{ENTRIES_PATH}/{entry_id}", DELETE)

    async def list(self) -> list[Entry]:
        """Fetch every entry for the current session."""
        return await asyncio.to_thread(self._list)

    async def create(self, draft: EntryDraft) -> Entry:
        """Create an entry. The server assigns the id."""
        return await asyncio.to_thread(self._create, draft)

    async def update(self, entry_id: str, draft: EntryDraft) -> Entry:
        """Replace date, price and note of an entry."""
        return await asyncio.to_thread(self._update, entry_id, draft)

    async def remove(self, entry_id: str) -> None:
        """Delete an entry."""
        await asyncio.to_thread(self._remove, entry_id)
