"""Stable public API facade for the validation engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .config import FsSourceConfig, ValidationConfig
from .grammar import GtsGrammar
from .registry import format_for, get_grammar, get_scanner
from .sources import FsSource, MemorySource, SourceItem, UrlSource
from .sources.base import InputSource
from .validate import Finding, Report, begin, validate_candidates

logger = logging.getLogger(__name__)

MEMORY_FILE_ID = "<memory>"


@dataclass(frozen=True)
class FileScan:
    file_id: str
    candidate_count: int
    findings: list[Finding] = field(default_factory=list)


def scan_item(item: SourceItem, config: ValidationConfig, grammar: GtsGrammar | None = None) -> FileScan:
    resolved_grammar = grammar if grammar is not None else get_grammar(config.grammar)
    scanner = get_scanner(format_for(item.file_id))
    candidates = scanner(item.content, config, resolved_grammar)
    findings = validate_candidates(item.file_id, candidates, config, grammar=resolved_grammar)
    return FileScan(file_id=item.file_id, candidate_count=len(candidates), findings=findings)


def validate_source(
    source: InputSource | Iterable[SourceItem],
    config: ValidationConfig | None = None,
    *,
    jobs: int = 1,
) -> Report:
    """Run ``normalize -> validate -> report`` over every item the source yields.

    ``InputError`` raised by the source propagates and no report is produced.
    """
    resolved = config if config is not None else ValidationConfig()
    grammar = get_grammar(resolved.grammar)
    builder = begin()

    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as ex:
            scans: Iterable[FileScan] = list(ex.map(lambda item: scan_item(item, resolved, grammar), source))
    else:
        scans = (scan_item(item, resolved, grammar) for item in source)

    for scan in scans:
        logger.debug(
            "Scanned %s: %d identifier(s), %d finding(s)",
            scan.file_id,
            scan.candidate_count,
            len(scan.findings),
        )
        builder.record_file(scan.file_id, scan.candidate_count, scan.findings)

    report = builder.finish()
    logger.debug(
        "Validation finished: %d file(s), %d error(s), %d warning(s)",
        report.scanned_files,
        report.errors_count(),
        report.warnings_count(),
    )
    return report


def validate_text(
    text: str,
    config: ValidationConfig | None = None,
    *,
    file_id: str = MEMORY_FILE_ID,
) -> Report:
    return validate_source(MemorySource([SourceItem(file_id=file_id, content=text)]), config)


def validate_documents(
    documents: Iterable[SourceItem | tuple[str, str]],
    config: ValidationConfig | None = None,
    *,
    jobs: int = 1,
) -> Report:
    return validate_source(MemorySource(documents), config, jobs=jobs)


def validate_fs(
    fs_config: FsSourceConfig,
    validation_config: ValidationConfig | None = None,
    *,
    jobs: int = 1,
) -> Report:
    """Validate files on disk.

    Raises ``InputError`` when ``fs_config.paths`` is empty, when a path does not
    exist, or when a discovered file cannot be read. Paths that exist but hold no
    scannable files give a report with ``scanned_files == 0``.
    """
    return validate_source(FsSource(fs_config), validation_config, jobs=jobs)


def validate_urls(
    urls: str | list[str],
    config: ValidationConfig | None = None,
    *,
    timeout: int = 20,
) -> Report:
    url_list = [urls] if isinstance(urls, str) else list(urls)
    return validate_source(UrlSource(url_list, timeout=timeout), config)


__all__ = [
    "MEMORY_FILE_ID",
    "FileScan",
    "scan_item",
    "validate_documents",
    "validate_fs",
    "validate_source",
    "validate_text",
    "validate_urls",
]
