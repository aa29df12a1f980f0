"""Filesystem validation source.

Discovers files on disk and yields ``SourceItem``s for the validation pipeline.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from fnmatch import fnmatchcase
from pathlib import Path

from ..config import FsSourceConfig
from ..errors import InputError
from .base import SourceItem

logger = logging.getLogger(__name__)

SKIP_DIRS = frozenset({"target", "node_modules", ".git", "vendor", ".gts-spec"})
SCANNED_EXTENSIONS = frozenset({".md", ".json", ".yaml", ".yml"})


def matches_exclude(path: Path, exclude_patterns: tuple[str, ...]) -> bool:
    path_text = path.as_posix()
    return any(
        fnmatchcase(path_text, pattern) or fnmatchcase(path.name, pattern)
        for pattern in exclude_patterns
    )


def matches_file_pattern(path: Path) -> bool:
    return path.suffix.lower() in SCANNED_EXTENSIONS


def find_files(config: FsSourceConfig) -> list[Path]:
    files: list[Path] = []
    exclude = tuple(pattern for pattern in config.exclude if str(pattern or "").strip())
    visited: set[str] = set()

    for root in config.paths:
        root = Path(root)
        if root.is_file():
            if matches_file_pattern(root) and not matches_exclude(root, exclude):
                files.append(root)
            continue
        if not root.is_dir():
            continue
        for dirpath, dirnames, filenames in os.walk(root, followlinks=config.follow_links):
            real_dir = os.path.realpath(dirpath)
            if real_dir in visited:
                dirnames[:] = []
                continue
            visited.add(real_dir)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in SKIP_DIRS and os.path.realpath(os.path.join(dirpath, name)) not in visited
            )
            for filename in filenames:
                file_path = Path(dirpath) / filename
                if not file_path.is_file() or not matches_file_pattern(file_path):
                    continue
                if matches_exclude(file_path, exclude):
                    continue
                files.append(file_path)

    # One path per real file; the lexically first spelling wins.
    unique: dict[str, Path] = {}
    for path in sorted(set(files)):
        unique.setdefault(os.path.realpath(path), path)
    return sorted(unique.values())


def read_source_item(path: Path, max_file_size: int) -> SourceItem | None:
    """Read one file, or return ``None`` when it should be skipped (oversized or not UTF-8)."""
    try:
        size = path.stat().st_size
        if size > max_file_size:
            logger.debug("Skipping %s: %d bytes exceeds limit of %d", path, size, max_file_size)
            return None
        content = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Skipping %s: not valid UTF-8", path)
        return None
    except OSError as exc:
        raise InputError(f"Cannot read {path}: {exc}", file_id=str(path)) from exc
    return SourceItem(file_id=path.as_posix(), content=content)


class FsSource:
    def __init__(self, config: FsSourceConfig) -> None:
        if not config.paths:
            raise InputError("No paths provided for validation")
        for path in config.paths:
            if not Path(path).exists():
                raise InputError(f"Path does not exist: {path}", file_id=str(path))
        self.config = config

    def __iter__(self) -> Iterator[SourceItem]:
        for path in find_files(self.config):
            item = read_source_item(path, self.config.max_file_size)
            if item is not None:
                yield item


__all__ = [
    "SCANNED_EXTENSIONS",
    "SKIP_DIRS",
    "FsSource",
    "find_files",
    "matches_exclude",
    "read_source_item",
]
