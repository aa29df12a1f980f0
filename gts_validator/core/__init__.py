"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Candidate": ("gts_validator.core.formats.common", "Candidate"),
    "Finding": ("gts_validator.core.validate.report", "Finding"),
    "FsSource": ("gts_validator.core.sources.fs", "FsSource"),
    "FsSourceConfig": ("gts_validator.core.config", "FsSourceConfig"),
    "GtsGrammar": ("gts_validator.core.grammar", "GtsGrammar"),
    "InputError": ("gts_validator.core.errors", "InputError"),
    "MemorySource": ("gts_validator.core.sources.base", "MemorySource"),
    "MustMatch": ("gts_validator.core.config", "MustMatch"),
    "Reason": ("gts_validator.core.validate.report", "Reason"),
    "Report": ("gts_validator.core.validate.report", "Report"),
    "ReportBuilder": ("gts_validator.core.validate.report", "ReportBuilder"),
    "ScanRecord": ("gts_validator.core.validate.report", "ScanRecord"),
    "Severity": ("gts_validator.core.validate.report", "Severity"),
    "SourceItem": ("gts_validator.core.sources.base", "SourceItem"),
    "Unconstrained": ("gts_validator.core.config", "Unconstrained"),
    "UrlSource": ("gts_validator.core.sources.url", "UrlSource"),
    "ValidationConfig": ("gts_validator.core.config", "ValidationConfig"),
    "begin": ("gts_validator.core.validate.report", "begin"),
    "config_from_env": ("gts_validator.core.config", "config_from_env"),
    "find_candidates": ("gts_validator.core.grammar", "find_candidates"),
    "get_grammar": ("gts_validator.core.registry", "get_grammar"),
    "get_scanner": ("gts_validator.core.registry", "get_scanner"),
    "is_well_formed": ("gts_validator.core.grammar", "is_well_formed"),
    "list_grammars": ("gts_validator.core.registry", "list_grammars"),
    "normalize": ("gts_validator.core.normalize", "normalize"),
    "register_grammar": ("gts_validator.core.registry", "register_grammar"),
    "register_scanner": ("gts_validator.core.registry", "register_scanner"),
    "render_human": ("gts_validator.core.renderers", "render_human"),
    "render_json": ("gts_validator.core.renderers", "render_json"),
    "validate_candidates": ("gts_validator.core.validate.rules", "validate_candidates"),
    "validate_documents": ("gts_validator.core.api", "validate_documents"),
    "validate_fs": ("gts_validator.core.api", "validate_fs"),
    "validate_source": ("gts_validator.core.api", "validate_source"),
    "validate_text": ("gts_validator.core.api", "validate_text"),
    "validate_urls": ("gts_validator.core.api", "validate_urls"),
    "vendor_policy_for": ("gts_validator.core.config", "vendor_policy_for"),
    "vendor_segment": ("gts_validator.core.grammar", "vendor_segment"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
