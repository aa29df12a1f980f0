"""Validation report types and the report builder.

A ``Report`` is only ever produced by ``ReportBuilder.finish``. The builder is
consumed by ``finish`` so nothing can observe a half-populated report.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Reason(str, Enum):
    MALFORMED_IDENTIFIER = "MalformedIdentifier"
    VENDOR_MISMATCH = "VendorMismatch"


@dataclass(frozen=True)
class Finding:
    file: str
    identifier: str
    reason: Reason
    message: str
    severity: Severity = Severity.ERROR
    line: int | None = None
    column: int | None = None
    raw: str = ""
    json_path: str | None = None

    @property
    def location(self) -> str:
        if self.line is not None:
            return str(self.line)
        return self.json_path or "?"

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "json_path": self.json_path,
            "severity": self.severity.value,
            "reason": self.reason.value,
            "identifier": self.identifier,
            "raw": self.raw,
            "message": self.message,
        }


@dataclass(frozen=True)
class ScanRecord:
    file: str
    identifiers_found: int
    findings_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "identifiers_found": self.identifiers_found,
            "findings_count": self.findings_count,
        }


@dataclass(frozen=True)
class Report:
    findings: tuple[Finding, ...] = ()
    scan_records: tuple[ScanRecord, ...] = ()

    @property
    def scanned_files(self) -> int:
        return len(self.scan_records)

    @property
    def ok(self) -> bool:
        return self.errors_count() == 0

    def errors_count(self) -> int:
        return sum(1 for finding in self.findings if finding.severity is Severity.ERROR)

    def warnings_count(self) -> int:
        return sum(1 for finding in self.findings if finding.severity is Severity.WARNING)

    def identifiers_found(self) -> int:
        return sum(record.identifiers_found for record in self.scan_records)

    def findings_for(self, file_id: str) -> list[Finding]:
        return [finding for finding in self.findings if finding.file == file_id]

    def to_dict(self) -> dict[str, Any]:
        return {
            "scanned_files": self.scanned_files,
            "ok": self.ok,
            "errors_count": self.errors_count(),
            "warnings_count": self.warnings_count(),
            "findings": [finding.to_dict() for finding in self.findings],
            "scan_records": [record.to_dict() for record in self.scan_records],
        }


@dataclass
class ReportBuilder:
    _findings: list[Finding] | None = field(default_factory=list)
    _records: list[ScanRecord] | None = field(default_factory=list)

    def record_file(self, file_id: str, candidate_count: int, findings: Iterable[Finding]) -> None:
        if self._findings is None or self._records is None:
            raise RuntimeError("ReportBuilder has already been finished.")
        file_findings = list(findings)
        self._records.append(
            ScanRecord(
                file=file_id,
                identifiers_found=candidate_count,
                findings_count=len(file_findings),
            )
        )
        self._findings.extend(file_findings)

    def finish(self) -> Report:
        if self._findings is None or self._records is None:
            raise RuntimeError("ReportBuilder has already been finished.")
        report = Report(findings=tuple(self._findings), scan_records=tuple(self._records))
        self._findings = None
        self._records = None
        return report


def begin() -> ReportBuilder:
    return ReportBuilder()


__all__ = ["Finding", "Reason", "Report", "ReportBuilder", "ScanRecord", "Severity", "begin"]
