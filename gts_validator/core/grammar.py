"""GTS identifier grammar.

A GTS identifier is the ``gts.`` prefix followed by a ``~``-separated chain of
segments. Type segments have five parts,
``vendor.package.namespace.type.v<MAJOR>[.<MINOR>]``, and end with ``~``. A
chain ending with ``~`` is a schema identifier; a chain followed by one final
segment without ``~`` is an instance identifier.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

GTS_PREFIX = "gts."
MAX_IDENTIFIER_LENGTH = 1024

_CANDIDATE_RE = re.compile(r"(?<![A-Za-z0-9_.\-/~])(?:[Gg][Tt][Ss]://)?gts\.[A-Za-z0-9_.~*\-]+")
_NAME_RE = re.compile(r"[a-z_][a-z0-9_]*")
_MAJOR_RE = re.compile(r"v(?:0|[1-9][0-9]*)")
_MINOR_RE = re.compile(r"0|[1-9][0-9]*")
_INSTANCE_PART_RE = re.compile(r"[a-z0-9_]+")
_TYPE_ILLEGAL_CHAR_RE = re.compile(r"[^a-z0-9_.]")

_PART_LABELS = ("vendor", "package", "namespace", "type")


@dataclass(frozen=True)
class CandidateSpan:
    start: int
    end: int
    raw: str


class GtsGrammar:
    """Rule set ``gts-1``."""

    name = "gts-1"
    max_length = MAX_IDENTIFIER_LENGTH

    def find_candidates(self, text: str) -> Iterator[CandidateSpan]:
        """Yield candidate spans left to right, longest match first, never overlapping."""
        for match in _CANDIDATE_RE.finditer(text or ""):
            yield CandidateSpan(start=match.start(), end=match.end(), raw=match.group(0))

    def looks_like_identifier(self, value: str) -> bool:
        lowered = str(value or "").strip().lower()
        return lowered.startswith(GTS_PREFIX) or lowered.startswith("gts://")

    def explain(self, token: str, *, allow_wildcards: bool = False) -> str | None:
        """Return the first grammar violation in ``token``, or ``None`` when it is well-formed."""
        if not token:
            return "Empty identifier"
        if len(token) > self.max_length:
            return f"Identifier exceeds {self.max_length} characters"
        if not token.startswith(GTS_PREFIX):
            return f"Identifier must start with {GTS_PREFIX!r}"

        body = token[len(GTS_PREFIX):]
        if "*" in body:
            if not allow_wildcards:
                return "Wildcards (*) are only allowed in pattern contexts"
            return self._explain_pattern(body)
        return self._explain_chain(body)

    def is_well_formed(self, token: str, *, allow_wildcards: bool = False) -> bool:
        return self.explain(token, allow_wildcards=allow_wildcards) is None

    def vendor_segment(self, token: str) -> str | None:
        if not self.is_well_formed(token, allow_wildcards=True):
            return None
        vendor = token[len(GTS_PREFIX):].split("~", 1)[0].split(".", 1)[0]
        if not vendor or vendor == "*":
            return None
        return vendor

    def _explain_chain(self, body: str) -> str | None:
        segments = body.split("~")
        if len(segments) == 1:
            error = self._explain_type_segment(segments[0], index=1)
            if error:
                return error
            return "Schema identifiers must end with '~'"

        *type_segments, last = segments
        for index, segment in enumerate(type_segments, start=1):
            error = self._explain_type_segment(segment, index=index)
            if error:
                return error
        if last == "":
            return None
        return self._explain_instance_segment(last, index=len(type_segments) + 1)

    def _explain_type_segment(self, segment: str, *, index: int) -> str | None:
        if not segment:
            return f"Segment {index} is empty"
        illegal = _TYPE_ILLEGAL_CHAR_RE.search(segment)
        if illegal:
            return f"Segment {index} contains illegal character {illegal.group(0)!r}"

        parts = segment.split(".")
        if len(parts) < 5:
            return (
                f"Segment {index} needs 5 parts (vendor.package.namespace.type.version), "
                f"found {len(parts)}"
            )
        if len(parts) > 6:
            return f"Segment {index} has too many parts ({len(parts)})"
        return self._explain_parts(parts, index=index)

    def _explain_parts(self, parts: list[str], *, index: int) -> str | None:
        for position, part in enumerate(parts):
            if position < len(_PART_LABELS):
                if not _NAME_RE.fullmatch(part):
                    label = _PART_LABELS[position]
                    return f"Segment {index} {label} {part!r} is not a valid name"
            elif position == len(_PART_LABELS):
                if not _MAJOR_RE.fullmatch(part):
                    return f"Segment {index} version {part!r} must look like v<MAJOR>[.<MINOR>]"
            elif not _MINOR_RE.fullmatch(part):
                return f"Segment {index} minor version {part!r} must be a number"
        return None

    def _explain_instance_segment(self, segment: str, *, index: int) -> str | None:
        for part in segment.split("."):
            if not part:
                return f"Segment {index} has an empty part"
            if not _INSTANCE_PART_RE.fullmatch(part):
                illegal = re.search(r"[^a-z0-9_]", part)
                return f"Segment {index} contains illegal character {illegal.group(0)!r}"
        return None

    def _explain_pattern(self, body: str) -> str | None:
        if body.count("*") != 1 or not body.endswith("*"):
            return "Wildcard (*) must appear once, as the last character"
        prefix = body[:-1]
        if not prefix:
            return None
        if not prefix.endswith((".", "~")):
            return "Wildcard (*) must follow '.' or '~'"

        *complete, partial = prefix.split("~")
        for index, segment in enumerate(complete, start=1):
            error = self._explain_type_segment(segment, index=index)
            if error:
                return error
        if not partial:
            return None

        index = len(complete) + 1
        illegal = _TYPE_ILLEGAL_CHAR_RE.search(partial)
        if illegal:
            return f"Segment {index} contains illegal character {illegal.group(0)!r}"
        parts = partial[:-1].split(".")
        if len(parts) > 5:
            return f"Segment {index} has too many parts ({len(parts)})"
        return self._explain_parts(parts, index=index)


GTS_GRAMMAR_V1 = GtsGrammar()


def find_candidates(text: str) -> Iterator[CandidateSpan]:
    return GTS_GRAMMAR_V1.find_candidates(text)


def is_well_formed(token: str, *, allow_wildcards: bool = False) -> bool:
    return GTS_GRAMMAR_V1.is_well_formed(token, allow_wildcards=allow_wildcards)


def explain(token: str, *, allow_wildcards: bool = False) -> str | None:
    return GTS_GRAMMAR_V1.explain(token, allow_wildcards=allow_wildcards)


def vendor_segment(token: str) -> str | None:
    return GTS_GRAMMAR_V1.vendor_segment(token)


__all__ = [
    "GTS_GRAMMAR_V1",
    "GTS_PREFIX",
    "MAX_IDENTIFIER_LENGTH",
    "CandidateSpan",
    "GtsGrammar",
    "explain",
    "find_candidates",
    "is_well_formed",
    "vendor_segment",
]
