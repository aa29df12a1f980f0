import logging

from gts_validator.core import ValidationConfig, validate_text
from gts_validator.core.formats import scan_yaml_content, split_yaml_documents
from gts_validator.core.grammar import GTS_GRAMMAR_V1

EVENTS = """\
id: gts.x.core.events.type.v1~
refs:
  - 'gts.x.core.events.topic.v1~'
  - x-gts-ref: gts.x.core.*
gts.x.core.keyed.type.v1~: 1
count: 3
"""


def _scan(text: str, **kwargs):
    return scan_yaml_content(text, ValidationConfig(**kwargs), GTS_GRAMMAR_V1)


def test_scalars_are_located() -> None:
    assert [(c.raw, c.json_path, c.line, c.column, c.allow_wildcards) for c in _scan(EVENTS)] == [
        ("gts.x.core.events.type.v1~", "$.id", 1, 5, False),
        ("gts.x.core.events.topic.v1~", "$.refs[0]", 3, 6, False),
        ("gts.x.core.*", "$.refs[1].x-gts-ref", 4, 16, True),
    ]


def test_keys_are_scanned_only_when_requested() -> None:
    keyed = [c for c in _scan(EVENTS, scan_keys=True) if c.raw == "gts.x.core.keyed.type.v1~"]

    assert [(c.line, c.column) for c in keyed] == [(5, 1)]


def test_split_yaml_documents_tracks_line_offsets() -> None:
    text = "a: 1\n---\nb: 2\n---\n\n---\nc: 3\n"

    assert split_yaml_documents(text) == [(0, "a: 1"), (2, "b: 2"), (6, "c: 3")]


def test_broken_document_does_not_hide_its_siblings(caplog) -> None:
    text = "id: gts.bad\n---\nkey: [unclosed\n---\nother: gts.x.core.events.type.v1~\n"

    with caplog.at_level(logging.WARNING):
        candidates = _scan(text)

    assert [(c.raw, c.line) for c in candidates] == [
        ("gts.bad", 1),
        ("gts.x.core.events.type.v1~", 5),
    ]
    assert "Skipping unparseable YAML document at line 3" in caplog.text


def test_aliases_are_followed_once_per_path() -> None:
    text = "base: &b\n  id: gts.x.core.events.type.v1~\ncopy: *b\n"

    assert [c.json_path for c in _scan(text)] == ["$.base.id", "$.copy.id"]


def test_non_string_scalars_are_ignored() -> None:
    assert _scan("a: 1\nb: true\nc: null\n") == []


def test_yaml_report_for_multi_document_stream() -> None:
    text = "---\nid: gts.x.core.events.type.v1~\n---\nid: gts.y.core.events.type.v1~\n"
    report = validate_text(text, ValidationConfig(), file_id="events.yaml")

    assert report.ok
    assert report.identifiers_found() == 2


def test_deeply_nested_yaml_is_skipped_with_a_warning(caplog) -> None:
    depth = 100_000
    text = '{"id": "gts.bad", "x": ' + "[" * depth + "]" * depth + "}"

    with caplog.at_level(logging.WARNING):
        report = validate_text(text, ValidationConfig(), file_id="deep.yaml")

    assert report.scanned_files == 1
    assert report.identifiers_found() == 0
    assert "nested too deeply" in caplog.text


def test_deep_document_does_not_hide_its_siblings(caplog) -> None:
    depth = 100_000
    text = "id: gts.x.core.events.type.v1~\n---\nx: " + "[" * depth + "]" * depth + "\n"

    with caplog.at_level(logging.WARNING):
        candidates = _scan(text)

    assert [(c.raw, c.line) for c in candidates] == [("gts.x.core.events.type.v1~", 1)]
