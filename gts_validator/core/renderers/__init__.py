"""Report renderers."""

from __future__ import annotations

from ..validate import Report
from .human import format_finding, format_summary, render_human, write_human
from .json import render_json, write_json

RENDER_TARGETS = ("human", "json")


def render_report(report: Report, *, target: str = "human") -> str:
    normalized = (target or "").strip().lower()
    if normalized == "json":
        return render_json(report)
    if normalized == "human":
        return render_human(report)
    raise ValueError("target must be one of: human, json")


__all__ = [
    "RENDER_TARGETS",
    "format_finding",
    "format_summary",
    "render_human",
    "render_json",
    "render_report",
    "write_human",
    "write_json",
]
