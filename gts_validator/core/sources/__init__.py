"""Input strategies: producers of ``(file identifier, content)`` pairs."""

from .base import InputSource, MemorySource, SourceItem
from .fs import FsSource, find_files
from .url import UrlSource, http_session

__all__ = [
    "FsSource",
    "InputSource",
    "MemorySource",
    "SourceItem",
    "UrlSource",
    "find_files",
    "http_session",
]
