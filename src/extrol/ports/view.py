"""View interface - what the core asks the UI to do."""

from typing import Protocol

from extrol.core.entries import Entry
from extrol.core.projection import Stats


class View(Protocol):
    """Interface for the presentation layer."""

    def show_error(self, message: str) -> None:
        ...

    def show_message(self, message: str) -> None:
        ...

    def navigate_to_auth(self) -> None:
        ...

    def navigate_to_dashboard(self) -> None:
        ...

    def render_list(self, entries: list[Entry], stats: Stats) -> None:
        """Display the projected entries and the aggregate stats."""
        ...
