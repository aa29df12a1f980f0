"""Line-oriented human-readable report rendering."""

from __future__ import annotations

from typing import TextIO

from ..validate import Finding, Reason, Report

_MALFORMED_HINTS = (
    "Schema IDs must end with ~ (e.g., gts.x.core.events.type.v1~)",
    "Each segment needs 5 parts: vendor.package.namespace.type.version",
    "Use lowercase letters, digits and underscores only; no hyphens",
)
_WILDCARD_HINT = "Wildcards (*) are only allowed in pattern contexts such as x-gts-ref"
_VENDOR_HINT = "Ensure all GTS IDs use the expected vendor"


def format_finding(finding: Finding) -> str:
    line = (
        f"{finding.file}:{finding.location}: {finding.severity.value.upper()} "
        f"{finding.reason.value} — {finding.identifier}"
    )
    if finding.message:
        line = f"{line} ({finding.message})"
    return line


def format_summary(report: Report) -> str:
    status = "OK" if report.ok else "FAILED"
    return (
        f"{status}: {report.scanned_files} file(s) scanned, "
        f"{report.errors_count()} error(s), {report.warnings_count()} warning(s)"
    )


def _hints(report: Report) -> list[str]:
    hints: list[str] = []
    malformed = [f for f in report.findings if f.reason is Reason.MALFORMED_IDENTIFIER]
    if any("Wildcard" not in f.message for f in malformed):
        hints.extend(_MALFORMED_HINTS)
    if any("Wildcard" in f.message for f in malformed):
        hints.append(_WILDCARD_HINT)
    if any(f.reason is Reason.VENDOR_MISMATCH for f in report.findings):
        hints.append(_VENDOR_HINT)
    return hints


def render_human(report: Report) -> str:
    lines = [format_finding(finding) for finding in report.findings]
    lines.append(format_summary(report))
    if not report.ok:
        hints = _hints(report)
        if hints:
            lines.append("To fix:")
            lines.extend(f"  - {hint}" for hint in hints)
    return "\n".join(lines) + "\n"


def write_human(report: Report, stream: TextIO) -> None:
    stream.write(render_human(report))


__all__ = ["format_finding", "format_summary", "render_human", "write_human"]
