"""Grammar and vendor-policy rules for located candidates."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import MustMatch, ValidationConfig, VendorPolicy
from ..formats.common import Candidate
from ..grammar import GtsGrammar
from ..normalize import normalize
from ..registry import get_grammar
from .report import Finding, Reason, Severity


def validate_candidate(
    file_id: str,
    candidate: Candidate,
    *,
    vendor_policy: VendorPolicy,
    grammar: GtsGrammar,
) -> Finding | None:
    identifier = normalize(candidate.raw)

    problem = grammar.explain(identifier, allow_wildcards=candidate.allow_wildcards)
    if problem is not None:
        return Finding(
            file=file_id,
            identifier=identifier,
            reason=Reason.MALFORMED_IDENTIFIER,
            message=problem,
            severity=Severity.ERROR,
            line=candidate.line,
            column=candidate.column,
            raw=candidate.raw,
            json_path=candidate.json_path,
        )

    vendor = grammar.vendor_segment(identifier)
    if vendor_policy.allows(vendor):
        return None

    expected = vendor_policy.vendor if isinstance(vendor_policy, MustMatch) else ""
    return Finding(
        file=file_id,
        identifier=identifier,
        reason=Reason.VENDOR_MISMATCH,
        message=f"Vendor mismatch: expected {expected!r}, found {vendor!r}",
        severity=Severity.ERROR,
        line=candidate.line,
        column=candidate.column,
        raw=candidate.raw,
        json_path=candidate.json_path,
    )


def validate_candidates(
    file_id: str,
    candidates: Iterable[Candidate],
    config: ValidationConfig,
    *,
    grammar: GtsGrammar | None = None,
) -> list[Finding]:
    resolved_grammar = grammar if grammar is not None else get_grammar(config.grammar)
    findings: list[Finding] = []
    for candidate in candidates:
        finding = validate_candidate(
            file_id,
            candidate,
            vendor_policy=config.vendor_policy,
            grammar=resolved_grammar,
        )
        if finding is not None:
            findings.append(finding)
    return findings


__all__ = ["validate_candidate", "validate_candidates"]
