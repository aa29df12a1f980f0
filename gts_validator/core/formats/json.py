"""JSON scanner.

Walks string values (and object keys when ``scan_keys`` is set). Values under
``x-gts-ref`` are pattern contexts where wildcards are legal.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..config import ValidationConfig
from ..grammar import GtsGrammar
from .common import X_GTS_REF_KEY, Candidate, LineIndex, child_path

logger = logging.getLogger(__name__)


class _LiteralLocator:
    """Finds JSON string literals in source order, moving forward only."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._cursor = 0
        self._index = LineIndex(text)

    def locate(self, value: str) -> tuple[int | None, int | None]:
        literal = json.dumps(value, ensure_ascii=False)
        offset = self._text.find(literal, self._cursor)
        if offset < 0:
            return None, None
        self._cursor = offset + len(literal)
        return self._index.position(offset + 1)


def _walk(
    value: Any,
    path: str,
    *,
    key: str | None,
    grammar: GtsGrammar,
    scan_keys: bool,
    locator: _LiteralLocator,
    out: list[Candidate],
) -> None:
    if isinstance(value, dict):
        for child_key, child_value in value.items():
            next_path = child_path(path, child_key)
            if grammar.looks_like_identifier(child_key):
                line, column = locator.locate(child_key)
                if scan_keys:
                    out.append(Candidate(raw=child_key, line=line, column=column, json_path=next_path))
            _walk(
                child_value,
                next_path,
                key=child_key,
                grammar=grammar,
                scan_keys=scan_keys,
                locator=locator,
                out=out,
            )
        return

    if isinstance(value, list):
        for index, item in enumerate(value):
            _walk(
                item,
                child_path(path, index),
                key=key,
                grammar=grammar,
                scan_keys=scan_keys,
                locator=locator,
                out=out,
            )
        return

    if not isinstance(value, str):
        return

    is_pattern = key == X_GTS_REF_KEY
    if is_pattern and value.strip() == "*":
        return
    if not grammar.looks_like_identifier(value):
        return
    line, column = locator.locate(value)
    out.append(
        Candidate(
            raw=value,
            line=line,
            column=column,
            json_path=path,
            allow_wildcards=is_pattern,
        )
    )


def scan_json_content(text: str, config: ValidationConfig, grammar: GtsGrammar) -> list[Candidate]:
    if not (text or "").strip():
        return []
    try:
        document = json.loads(text)
    except ValueError as exc:
        logger.warning("Skipping unparseable JSON content: %s", exc)
        return []
    except RecursionError:
        logger.warning("Skipping JSON content nested too deeply to parse")
        return []

    candidates: list[Candidate] = []
    try:
        _walk(
            document,
            "$",
            key=None,
            grammar=grammar,
            scan_keys=config.scan_keys,
            locator=_LiteralLocator(text),
            out=candidates,
        )
    except RecursionError:
        logger.warning("Skipping JSON content nested too deeply to scan")
        return []
    return candidates


__all__ = ["scan_json_content"]
