"""Command-line frontend for the GTS validation engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from gts_validator.core import (
    FsSourceConfig,
    InputError,
    MustMatch,
    ValidationConfig,
    config_from_env,
    validate_fs,
    vendor_policy_for,
)
from gts_validator.core.config import DEFAULT_MAX_FILE_SIZE
from gts_validator.core.renderers import write_human, write_json
from gts_validator.logging import report_to_loggable

DEFAULT_SCAN_DIRS = ("docs", "modules", "libs", "examples")

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_RUN_ERROR = 2

logger = logging.getLogger("gts_validator")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gts-validator",
        description="Validate GTS identifiers in .md/.json/.yaml/.yml files.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=f"Files or directories to scan (default: {', '.join(DEFAULT_SCAN_DIRS)})",
    )
    parser.add_argument("--vendor", default=None, help="Expected vendor for all GTS IDs")
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="Exclude pattern (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only discover identifiers inside Markdown code blocks and code spans",
    )
    parser.add_argument("--scan-keys", action="store_true", help="Also scan JSON/YAML object keys")
    parser.add_argument(
        "--skip-token",
        dest="skip_tokens",
        action="append",
        default=[],
        metavar="TOKEN",
        help="Skip Markdown candidates preceded by TOKEN on the same line (repeatable)",
    )
    parser.add_argument("--max-file-size", type=int, default=DEFAULT_MAX_FILE_SIZE)
    parser.add_argument("--jobs", type=int, default=1, help="Scan files on N worker threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show scanning progress on stderr")
    return parser


def _resolve_paths(raw_paths: list[str]) -> list[Path]:
    if raw_paths:
        return [Path(path) for path in raw_paths]
    return [Path(name) for name in DEFAULT_SCAN_DIRS if Path(name).exists()]


def _validation_config(args: argparse.Namespace) -> ValidationConfig:
    """Flags override the GTS_VALIDATOR_VENDOR and GTS_VALIDATOR_STRICT defaults."""
    env_config = config_from_env(
        strict=True if args.strict else None,
        scan_keys=args.scan_keys,
        skip_tokens=tuple(args.skip_tokens),
    )
    if args.vendor is None:
        return env_config
    return replace(env_config, vendor_policy=vendor_policy_for(args.vendor))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path.cwd() / ".env")
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    paths = _resolve_paths(args.paths)
    if not paths:
        print("error: No existing paths to scan. Provide paths explicitly.", file=sys.stderr)
        return EXIT_RUN_ERROR

    fs_config = FsSourceConfig(
        paths=tuple(paths),
        exclude=tuple(args.exclude),
        max_file_size=args.max_file_size,
    )
    try:
        validation_config = _validation_config(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_RUN_ERROR

    if args.verbose:
        print(f"Scanning paths: {', '.join(str(path) for path in paths)}", file=sys.stderr)
        if isinstance(validation_config.vendor_policy, MustMatch):
            print(f"Expected vendor: {validation_config.vendor_policy.vendor}", file=sys.stderr)

    try:
        report = validate_fs(fs_config, validation_config, jobs=max(1, args.jobs))
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_RUN_ERROR

    if args.verbose:
        print(f"Scanned {report.scanned_files} files", file=sys.stderr)
        loggable = report_to_loggable(report, debug_enabled=True)
        logger.debug("Validation report summary:\n%s", json.dumps(loggable, ensure_ascii=False, indent=2))

    if args.json:
        write_json(report, sys.stdout)
    else:
        write_human(report, sys.stdout)

    return EXIT_OK if report.ok else EXIT_FINDINGS


if __name__ == "__main__":
    raise SystemExit(main())
