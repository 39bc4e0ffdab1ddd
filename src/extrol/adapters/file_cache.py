"""File-based session cache adapter."""

import json
import logging
from pathlib import Path

from extrol.core.entries import Entry
from extrol.core.session import Session, User

logger = logging.getLogger(__name__)

TOKEN_FILENAME = ".token"
USER_FILENAME = "user.json"
PREFETCH_FILENAME = "prefetch_entries.json"


class FileSessionCache:
    """
    File-based session cache.

    Implements SessionCache protocol. The token, the user profile and the
    prefetched entries each get their own file.
    """

    def __init__(self, cache_dir: Path | str):
        self.cache_dir = Path(cache_dir).expanduser()

    @property
    def token_path(self) -> Path:
        return self.cache_dir / TOKEN_FILENAME

    @property
    def user_path(self) -> Path:
        return self.cache_dir / USER_FILENAME

    @property
    def prefetch_path(self) -> Path:
        return self.cache_dir / PREFETCH_FILENAME

    def save(self, token: str, user: User) -> None:
        """Persist the token and user profile."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.token_path.write_text(token, encoding="utf-8")
        self.token_path.chmod(0o600)
        self.user_path.write_text(json.dumps(user.to_dict()), encoding="utf-8")

    def load(self) -> Session | None:
        """Load the stored session. Returns None if absent or unreadable."""
        if not self.token_path.exists() or not self.user_path.exists():
            return None
        try:
            token = self.token_path.read_text(encoding="utf-8").strip()
            data = json.loads(self.user_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable cached session in {self.cache_dir}: {e}")
            return None
        if not token:
            return None
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed user record {self.user_path}")
            return None
        return Session(token=token, user=User.from_dict(data))

    def clear(self) -> None:
        """Remove the stored session and any prefetched entries."""
        for path in (self.token_path, self.user_path, self.prefetch_path):
            path.unlink(missing_ok=True)

    def take_prefetch(self) -> list[Entry] | None:
        """Return and delete the prefetched entry list, if any."""
        if not self.prefetch_path.exists():
            return None
        try:
            data = json.loads(self.prefetch_path.read_text(encoding="utf-8"))
            return [Entry.from_api(item) for item in data]
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable prefetch list: {e}")
            return None
        finally:
            self.prefetch_path.unlink(missing_ok=True)

    def stash_prefetch(self, entries: list[Entry]) -> None:
        """Store an entry list for the next take_prefetch."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.prefetch_path.write_text(json.dumps([e.to_dict() for e in entries]), encoding="utf-8")
