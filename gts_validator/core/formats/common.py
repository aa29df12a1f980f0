"""Shared candidate types for content-format scanners."""

from __future__ import annotations

import json
import re
from bisect import bisect_right
from dataclasses import dataclass

X_GTS_REF_KEY = "x-gts-ref"

_IDENTIFIER_KEY_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$-]*")


@dataclass(frozen=True)
class Candidate:
    """One raw identifier occurrence located in a file."""

    raw: str
    line: int | None = None
    column: int | None = None
    json_path: str | None = None
    allow_wildcards: bool = False


def child_path(parent: str, key: object) -> str:
    if isinstance(key, int):
        return f"{parent}[{key}]"
    text = str(key)
    if _IDENTIFIER_KEY_RE.fullmatch(text):
        return f"{parent}.{text}"
    return f"{parent}[{json.dumps(text, ensure_ascii=False)}]"


class LineIndex:
    """Maps character offsets in a text buffer to 1-based (line, column)."""

    def __init__(self, text: str) -> None:
        self._starts = [0]
        for index, char in enumerate(text):
            if char == "\n":
                self._starts.append(index + 1)

    def position(self, offset: int) -> tuple[int, int]:
        line_index = bisect_right(self._starts, offset) - 1
        return line_index + 1, offset - self._starts[line_index] + 1


__all__ = ["Candidate", "LineIndex", "X_GTS_REF_KEY", "child_path"]
