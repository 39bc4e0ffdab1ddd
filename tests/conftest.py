"""Shared fakes for the entry store, session and controller tests."""

import asyncio

import pytest

from extrol.core.entries import Entry, EntryDraft
from extrol.core.session import Session, User


class FakeRepository:
    """In-memory EntryRepository. Set `error` to make the next call raise it."""

    def __init__(self, entries: list[Entry] | None = None):
        self.entries = list(entries or [])
        self.error: Exception | None = None
        self.calls: list[tuple] = []
        self.gate: asyncio.Event | None = None
        self._next_id = 100

    async def _enter(self, *call) -> None:
        self.calls.append(call)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            error, self.error = self.error, None
            raise error

    async def list(self) -> list[Entry]:
        await self._enter("list")
        return [Entry(e.id, e.date, e.price, e.note) for e in self.entries]

    async def create(self, draft: EntryDraft) -> Entry:
        await self._enter("create", draft)
        self._next_id += 1
        entry = Entry(id=str(self._next_id), date=draft.date, price=draft.price, note=draft.note)
        self.entries.append(entry)
        return entry

    async def update(self, entry_id: str, draft: EntryDraft) -> Entry:
        await self._enter("update", entry_id, draft)
        entry = Entry(id=entry_id, date=draft.date, price=draft.price, note=draft.note)
        self.entries = [entry if e.id == entry_id else e for e in self.entries]
        return entry

    async def remove(self, entry_id: str) -> None:
        await self._enter("remove", entry_id)
        self.entries = [e for e in self.entries if e.id != entry_id]


class FakeCache:
    """In-memory SessionCache."""

    def __init__(self, session: Session | None = None, prefetch: list[Entry] | None = None):
        self.session = session
        self.prefetch = prefetch
        self.cleared = False

    def save(self, token: str, user: User) -> None:
        self.session = Session(token=token, user=user)

    def load(self) -> Session | None:
        return self.session

    def clear(self) -> None:
        self.session = None
        self.prefetch = None
        self.cleared = True

    def take_prefetch(self) -> list[Entry] | None:
        prefetch, self.prefetch = self.prefetch, None
        return prefetch

    def stash_prefetch(self, entries: list[Entry]) -> None:
        self.prefetch = list(entries)


class RecordingView:
    """View that records every call."""

    def __init__(self):
        self.errors: list[str] = []
        self.messages: list[str] = []
        self.navigations: list[str] = []
        self.renders: list[tuple] = []

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_message(self, message: str) -> None:
        self.messages.append(message)

    def navigate_to_auth(self) -> None:
        self.navigations.append("auth")

    def navigate_to_dashboard(self) -> None:
        self.navigations.append("dashboard")

    def render_list(self, entries, stats) -> None:
        self.renders.append((list(entries), stats))


@pytest.fixture
def user():
    return User(id="u1", name="Asha", email="asha@example.com")


@pytest.fixture
def sample_entries():
    return [
        Entry(id="1", date="2024-01-01", price=10.0, note="Gas refill"),
        Entry(id="2", date="2024-02-01", price=20.0, note="Oil change"),
        Entry(id="3", date="2024-01-15", price=5.5, note=""),
    ]


@pytest.fixture
def repository(sample_entries):
    return FakeRepository(sample_entries)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def cache():
    return FakeCache()


@pytest.fixture
def signed_in_cache(user):
    return FakeCache(session=Session(token="tok-123", user=user))
