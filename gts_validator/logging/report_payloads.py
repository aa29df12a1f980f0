from collections import Counter
from typing import Any

from ..config import get_settings
from ..core.validate import Report

_MEDIUM_FINDING_LIMIT = 10
_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}
_MESSAGE_LIMIT = 120


def _truncate_message(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _reason_counts(report: Report) -> dict[str, int]:
    counts = Counter(finding.reason.value for finding in report.findings)
    return dict(sorted(counts.items()))


def report_to_loggable(
    report: Report,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    if level == "extrahigh":
        return report.to_dict()

    summary: dict[str, Any] = {
        "scanned_files": report.scanned_files,
        "ok": report.ok,
        "errors_count": report.errors_count(),
        "warnings_count": report.warnings_count(),
        "identifiers_found": report.identifiers_found(),
        "reasons": _reason_counts(report),
    }

    if level == "low":
        return summary

    if level == "high":
        summary["findings"] = [finding.to_dict() for finding in report.findings]
        return summary

    limit = _MEDIUM_FINDING_LIMIT
    summary["findings"] = [
        {
            "location": f"{finding.file}:{finding.location}",
            "reason": finding.reason.value,
            "identifier": finding.identifier,
            "message": _truncate_message(finding.message, limit=_MESSAGE_LIMIT),
        }
        for finding in report.findings[:limit]
    ]
    if len(report.findings) > limit:
        summary["findings_truncated"] = len(report.findings) - limit
    return summary
