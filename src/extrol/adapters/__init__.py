"""Adapters - I/O implementations of ports."""

from .api_client import ExtrolAPIAdapter, EntryClientError, NetworkError, RemoteError
from .console_view import ConsoleView
from .file_cache import FileSessionCache

__all__ = [
    "ExtrolAPIAdapter",
    "EntryClientError",
    "NetworkError",
    "RemoteError",
    "ConsoleView",
    "FileSessionCache",
]
