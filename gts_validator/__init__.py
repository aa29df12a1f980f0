"""Public package entrypoint for the GTS identifier validator.

This package provides a stable import surface for the core validation engine
(grammar, normalization, validation and reporting), plus optional frontend
adapters (CLI and FastAPI server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Finding": ("gts_validator.core", "Finding"),
    "FsSourceConfig": ("gts_validator.core", "FsSourceConfig"),
    "InputError": ("gts_validator.core", "InputError"),
    "MustMatch": ("gts_validator.core", "MustMatch"),
    "Report": ("gts_validator.core", "Report"),
    "Unconstrained": ("gts_validator.core", "Unconstrained"),
    "ValidationConfig": ("gts_validator.core", "ValidationConfig"),
    "app": ("gts_validator.server.main", "app"),
    "create_app": ("gts_validator.server.main", "create_app"),
    "validate_fs": ("gts_validator.core", "validate_fs"),
    "validate_source": ("gts_validator.core", "validate_source"),
    "validate_text": ("gts_validator.core", "validate_text"),
    "validate_urls": ("gts_validator.core", "validate_urls"),
}

try:
    __version__ = version("gts-validator")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Finding",
    "FsSourceConfig",
    "InputError",
    "MustMatch",
    "Report",
    "Unconstrained",
    "ValidationConfig",
    "__version__",
    "app",
    "create_app",
    "validate_fs",
    "validate_source",
    "validate_text",
    "validate_urls",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
