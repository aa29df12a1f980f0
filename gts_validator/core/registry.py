"""Minimal registry for grammar rule sets and content-format scanners."""


from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from .config import ValidationConfig
from .formats.common import Candidate
from .grammar import GTS_GRAMMAR_V1, GtsGrammar

ScannerFn = Callable[[str, ValidationConfig, GtsGrammar], list[Candidate]]

FALLBACK_FORMAT = "markdown"


@dataclass
class Registry:
    grammars: dict[str, GtsGrammar] = field(default_factory=dict)
    scanners: dict[str, ScannerFn] = field(default_factory=dict)
    extensions: dict[str, str] = field(default_factory=dict)

    def register_grammar(self, key: str, grammar: GtsGrammar) -> None:
        self.grammars[str(key).strip().lower()] = grammar

    def register_scanner(self, key: str, handler: ScannerFn, *, extensions: tuple[str, ...] = ()) -> None:
        normalized = str(key).strip().lower()
        self.scanners[normalized] = handler
        for extension in extensions:
            self.extensions[str(extension).strip().lower().lstrip(".")] = normalized

    def get_grammar(self, key: str) -> GtsGrammar:
        normalized = str(key).strip().lower()
        grammar = self.grammars.get(normalized)
        if grammar is None:
            raise KeyError(f"No grammar registered for key: {normalized}")
        return grammar

    def get_scanner(self, key: str) -> ScannerFn:
        normalized = str(key).strip().lower()
        handler = self.scanners.get(normalized)
        if handler is None:
            raise KeyError(f"No scanner registered for key: {normalized}")
        return handler

    def format_for(self, file_id: str) -> str:
        text = str(file_id or "").replace("\\", "/")
        if "://" in text:
            text = urlsplit(text).path
        suffix = PurePosixPath(text).suffix.lower().lstrip(".")
        return self.extensions.get(suffix, FALLBACK_FORMAT)

    def list_grammars(self) -> list[str]:
        return sorted(self.grammars.keys())

    def list_scanners(self) -> list[str]:
        return sorted(self.scanners.keys())

    def supported_extensions(self) -> list[str]:
        return sorted(self.extensions.keys())


_registry = Registry()


def register_grammar(key: str, grammar: GtsGrammar) -> None:
    _registry.register_grammar(key, grammar)


def register_scanner(key: str, handler: ScannerFn, *, extensions: tuple[str, ...] = ()) -> None:
    _registry.register_scanner(key, handler, extensions=extensions)


def get_grammar(key: str) -> GtsGrammar:
    return _registry.get_grammar(key)


def get_scanner(key: str) -> ScannerFn:
    return _registry.get_scanner(key)


def format_for(file_id: str) -> str:
    return _registry.format_for(file_id)


def list_grammars() -> list[str]:
    return _registry.list_grammars()


def list_scanners() -> list[str]:
    return _registry.list_scanners()


def supported_extensions() -> list[str]:
    return _registry.supported_extensions()


def _register_defaults() -> None:
    from .formats.json import scan_json_content
    from .formats.markdown import scan_markdown_content
    from .formats.yaml import scan_yaml_content

    if GTS_GRAMMAR_V1.name not in _registry.grammars:
        _registry.register_grammar(GTS_GRAMMAR_V1.name, GTS_GRAMMAR_V1)
    if "markdown" not in _registry.scanners:
        _registry.register_scanner("markdown", scan_markdown_content, extensions=("md",))
    if "json" not in _registry.scanners:
        _registry.register_scanner("json", scan_json_content, extensions=("json",))
    if "yaml" not in _registry.scanners:
        _registry.register_scanner("yaml", scan_yaml_content, extensions=("yaml", "yml"))


_register_defaults()


__all__ = [
    "FALLBACK_FORMAT",
    "Registry",
    "format_for",
    "get_grammar",
    "get_scanner",
    "list_grammars",
    "list_scanners",
    "register_grammar",
    "register_scanner",
    "supported_extensions",
]
