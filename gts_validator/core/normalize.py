"""Candidate normalization.

``normalize`` is total and idempotent. It trims surrounding noise and the
``gts://`` URI scheme but never case-folds the identifier body, so malformed
casing is still reported by the grammar.
"""

import re

GTS_SCHEME = "gts://"

_WRAPPING_CHARS = "\"'`<>()[]{}"
_TRAILING_PUNCTUATION = ".,;:!?"
_SCHEME_RE = re.compile(r"^gts://", re.I)


def _strip_once(value: str) -> str:
    text = value.strip()
    text = text.strip(_WRAPPING_CHARS).strip()
    text = text.rstrip(_TRAILING_PUNCTUATION).strip()
    return _SCHEME_RE.sub("", text, count=1)


def normalize(raw: str) -> str:
    text = str(raw or "")
    while True:
        stripped = _strip_once(text)
        if stripped == text:
            return stripped
        text = stripped


def render(normalized: str) -> str:
    """Render a normalized identifier as its ``gts://`` URI form."""
    return f"{GTS_SCHEME}{normalized}"


__all__ = ["GTS_SCHEME", "normalize", "render"]
