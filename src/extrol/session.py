"""Session manager - owns the authentication state."""

import logging

from .core.entries import Entry
from .core.session import Session, User
from .ports import SessionCache, View

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Two states: unauthenticated (session is None) and authenticated.

    Every transition bumps `generation`, so work started under one session can
    tell that it finished under another.
    """

    def __init__(self, cache: SessionCache, view: View):
        self.cache = cache
        self.view = view
        self.session: Session | None = None
        self.generation = 0

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None

    @property
    def token(self) -> str | None:
        return self.session.token if self.session else None

    @property
    def user(self) -> User | None:
        return self.session.user if self.session else None

    def restore(self) -> bool:
        """Adopt the cached session at startup. Returns False if there is none."""
        stored = self.cache.load()
        if stored is None:
            logger.debug("No cached session")
            return False
        self._enter(stored)
        return True

    def login(self, token: str, user: User) -> None:
        """Enter the authenticated state after a login or signup completes."""
        self._enter(Session(token=token, user=user))

    def _enter(self, session: Session) -> None:
        self.session = session
        self.generation += 1
        self.cache.save(session.token, session.user)
        logger.info(f"Signed in as {session.user.display_name or 'unknown user'}")
        self.view.navigate_to_dashboard()

    def logout(self) -> None:
        """Drop the session and clear the cache. Safe to call when signed out."""
        if self.session is not None:
            self.cache.clear()
            self.session = None
            self.generation += 1
            logger.info("Signed out")
        self.view.navigate_to_auth()

    def take_prefetch(self) -> list[Entry] | None:
        return self.cache.take_prefetch()
