"""Markdown and plain-text scanner.

Every line is scanned with the grammar's candidate pattern. In strict mode only
candidates inside fenced code blocks or inline code spans are kept.
"""

from __future__ import annotations

import re

from ..config import ValidationConfig
from ..grammar import CandidateSpan, GtsGrammar
from .common import Candidate

_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_CODE_SPAN_RE = re.compile(r"(`+)(.+?)\1")


def _code_span_ranges(line: str) -> list[tuple[int, int]]:
    return [(match.start(2), match.end(2)) for match in _CODE_SPAN_RE.finditer(line)]


def _inside(span: CandidateSpan, ranges: list[tuple[int, int]]) -> bool:
    return any(start <= span.start and span.end <= end for start, end in ranges)


def _is_skipped(prefix: str, skip_tokens: list[str]) -> bool:
    lowered = prefix.lower()
    return any(token in lowered for token in skip_tokens)


def scan_markdown_content(text: str, config: ValidationConfig, grammar: GtsGrammar) -> list[Candidate]:
    skip_tokens = [token.strip().lower() for token in config.skip_tokens if str(token or "").strip()]
    candidates: list[Candidate] = []
    fence: str | None = None

    for line_number, line in enumerate((text or "").splitlines(), start=1):
        fence_match = _FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
                continue
            if marker[0] == fence[0] and len(marker) >= len(fence) and not line.strip(marker[0]).strip():
                fence = None
                continue

        in_fence = fence is not None
        code_spans = _code_span_ranges(line) if config.strict and not in_fence else []

        for span in grammar.find_candidates(line):
            if config.strict and not in_fence and not _inside(span, code_spans):
                continue
            if skip_tokens and _is_skipped(line[: span.start], skip_tokens):
                continue
            candidates.append(Candidate(raw=span.raw, line=line_number, column=span.start + 1))

    return candidates


__all__ = ["scan_markdown_content"]
