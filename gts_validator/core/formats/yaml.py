"""YAML scanner.

Composes the node graph (not constructed values) so every candidate keeps its
line and column. A stream that fails to parse is retried one ``---`` document at
a time so valid sibling documents are still validated.
"""

from __future__ import annotations

import logging

import yaml

from ..config import ValidationConfig
from ..grammar import GtsGrammar
from .common import X_GTS_REF_KEY, Candidate, child_path

logger = logging.getLogger(__name__)

_STR_TAG = "tag:yaml.org,2002:str"


def split_yaml_documents(content: str) -> list[tuple[int, str]]:
    """Split a stream on ``---`` lines, returning (line offset, document text) pairs."""
    documents: list[tuple[int, str]] = []
    current: list[str] = []
    start = 0

    for index, line in enumerate(content.splitlines()):
        if line.strip() == "---":
            doc = "\n".join(current)
            if doc.strip():
                documents.append((start, doc))
            current = []
            start = index + 1
            continue
        current.append(line)

    doc = "\n".join(current)
    if doc.strip():
        documents.append((start, doc))
    return documents


def _scalar_candidate(
    node: yaml.ScalarNode,
    path: str,
    *,
    line_offset: int,
    allow_wildcards: bool,
) -> Candidate:
    column = node.start_mark.column + 1
    if node.style in ("'", '"'):
        column += 1
    return Candidate(
        raw=node.value,
        line=node.start_mark.line + 1 + line_offset,
        column=column,
        json_path=path,
        allow_wildcards=allow_wildcards,
    )


def _walk(
    node: yaml.Node,
    path: str,
    *,
    key: str | None,
    grammar: GtsGrammar,
    scan_keys: bool,
    line_offset: int,
    active: set[int],
    out: list[Candidate],
) -> None:
    if id(node) in active:
        return
    active.add(id(node))
    try:
        if isinstance(node, yaml.MappingNode):
            for key_node, value_node in node.value:
                child_key = key_node.value if isinstance(key_node, yaml.ScalarNode) else None
                next_path = child_path(path, child_key if child_key is not None else "?")
                if (
                    scan_keys
                    and child_key is not None
                    and key_node.tag == _STR_TAG
                    and grammar.looks_like_identifier(child_key)
                ):
                    out.append(
                        _scalar_candidate(key_node, next_path, line_offset=line_offset, allow_wildcards=False)
                    )
                _walk(
                    value_node,
                    next_path,
                    key=child_key,
                    grammar=grammar,
                    scan_keys=scan_keys,
                    line_offset=line_offset,
                    active=active,
                    out=out,
                )
        elif isinstance(node, yaml.SequenceNode):
            for index, item in enumerate(node.value):
                _walk(
                    item,
                    child_path(path, index),
                    key=key,
                    grammar=grammar,
                    scan_keys=scan_keys,
                    line_offset=line_offset,
                    active=active,
                    out=out,
                )
        elif isinstance(node, yaml.ScalarNode) and node.tag == _STR_TAG:
            is_pattern = key == X_GTS_REF_KEY
            if is_pattern and node.value.strip() == "*":
                return
            if grammar.looks_like_identifier(node.value):
                out.append(
                    _scalar_candidate(node, path, line_offset=line_offset, allow_wildcards=is_pattern)
                )
    finally:
        active.discard(id(node))


def _compose_documents(content: str) -> list[tuple[int, yaml.Node]]:
    try:
        return [(0, node) for node in yaml.compose_all(content, Loader=yaml.SafeLoader) if node is not None]
    except (yaml.YAMLError, RecursionError) as exc:
        logger.debug("YAML stream failed to parse, retrying per document: %s", exc)

    documents: list[tuple[int, yaml.Node]] = []
    for line_offset, segment in split_yaml_documents(content):
        try:
            node = yaml.compose(segment, Loader=yaml.SafeLoader)
        except yaml.YAMLError as exc:
            logger.warning("Skipping unparseable YAML document at line %d: %s", line_offset + 1, exc)
            continue
        except RecursionError:
            logger.warning("Skipping YAML document at line %d: nested too deeply to parse", line_offset + 1)
            continue
        if node is not None:
            documents.append((line_offset, node))
    return documents


def scan_yaml_content(text: str, config: ValidationConfig, grammar: GtsGrammar) -> list[Candidate]:
    if not (text or "").strip():
        return []

    candidates: list[Candidate] = []
    for line_offset, node in _compose_documents(text):
        found: list[Candidate] = []
        try:
            _walk(
                node,
                "$",
                key=None,
                grammar=grammar,
                scan_keys=config.scan_keys,
                line_offset=line_offset,
                active=set(),
                out=found,
            )
        except RecursionError:
            logger.warning("Skipping YAML document at line %d: nested too deeply to scan", line_offset + 1)
            continue
        candidates.extend(found)
    return candidates


__all__ = ["scan_yaml_content", "split_yaml_documents"]
