from .report import Finding, Reason, Report, ReportBuilder, ScanRecord, Severity, begin
from .rules import validate_candidate, validate_candidates

__all__ = [
    "Finding",
    "Reason",
    "Report",
    "ReportBuilder",
    "ScanRecord",
    "Severity",
    "begin",
    "validate_candidate",
    "validate_candidates",
]
