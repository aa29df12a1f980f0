"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_GRAMMAR = "gts-1"
DEFAULT_MAX_FILE_SIZE = 10_485_760


@dataclass(frozen=True)
class Unconstrained:
    """Any vendor is accepted."""

    def allows(self, vendor: str | None) -> bool:
        return True


@dataclass(frozen=True)
class MustMatch:
    """Every identifier's vendor segment must equal ``vendor``."""

    vendor: str

    def __post_init__(self) -> None:
        if not str(self.vendor or "").strip():
            raise ValueError("MustMatch vendor must be a non-empty string.")

    def allows(self, vendor: str | None) -> bool:
        if vendor is None:
            return True
        return vendor == self.vendor


VendorPolicy = Unconstrained | MustMatch


def vendor_policy_for(vendor: str | None) -> VendorPolicy:
    """Only ``None`` means unconstrained; a blank vendor raises ``ValueError``."""
    if vendor is None:
        return Unconstrained()
    return MustMatch(str(vendor).strip())


@dataclass(frozen=True)
class ValidationConfig:
    vendor_policy: VendorPolicy = field(default_factory=Unconstrained)
    strict: bool = False
    scan_keys: bool = False
    skip_tokens: tuple[str, ...] = ()
    grammar: str = DEFAULT_GRAMMAR


@dataclass(frozen=True)
class FsSourceConfig:
    """Filesystem source options.

    ``paths`` must be non-empty. Default scan roots are a CLI concern and are
    not baked in here.
    """

    paths: tuple[Path, ...] = ()
    exclude: tuple[str, ...] = ()
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    follow_links: bool = True


def config_from_env(
    *,
    strict: bool | None = None,
    scan_keys: bool = False,
    skip_tokens: tuple[str, ...] = (),
) -> ValidationConfig:
    if strict is None:
        strict = str(os.getenv("GTS_VALIDATOR_STRICT", "")).strip().lower() in {"1", "true", "yes", "on"}
    return ValidationConfig(
        vendor_policy=vendor_policy_for(os.getenv("GTS_VALIDATOR_VENDOR") or None),
        strict=strict,
        scan_keys=scan_keys,
        skip_tokens=tuple(skip_tokens),
    )


__all__ = [
    "DEFAULT_GRAMMAR",
    "DEFAULT_MAX_FILE_SIZE",
    "FsSourceConfig",
    "MustMatch",
    "Unconstrained",
    "ValidationConfig",
    "VendorPolicy",
    "config_from_env",
    "vendor_policy_for",
]
