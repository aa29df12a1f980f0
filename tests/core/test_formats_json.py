import json
import logging

from gts_validator.core import Reason, ValidationConfig, validate_text
from gts_validator.core.formats import scan_json_content
from gts_validator.core.formats.common import child_path
from gts_validator.core.grammar import GTS_GRAMMAR_V1

SCHEMA = """{
  "$id": "gts.x.core.events.type.v1~",
  "properties": {
    "type": {"x-gts-ref": "gts.x.core.events.*"},
    "any": {"x-gts-ref": "*"},
    "items": ["gts.x.core.a.b.v1~", "not an id", 42]
  },
  "gts.x.core.keyed.type.v1~": true,
  "weird key": "gts.bad"
}
"""


def _scan(text: str, **kwargs):
    return scan_json_content(text, ValidationConfig(**kwargs), GTS_GRAMMAR_V1)


def test_values_are_located_with_json_path_and_position() -> None:
    candidates = _scan(SCHEMA)

    assert [(c.raw, c.json_path, c.line, c.column) for c in candidates] == [
        ("gts.x.core.events.type.v1~", "$.$id", 2, 11),
        ("gts.x.core.events.*", "$.properties.type.x-gts-ref", 4, 28),
        ("gts.x.core.a.b.v1~", "$.properties.items[0]", 6, 16),
        ("gts.bad", '$["weird key"]', 9, 17),
    ]


def test_only_x_gts_ref_values_allow_wildcards() -> None:
    flags = {c.raw: c.allow_wildcards for c in _scan(SCHEMA)}

    assert flags["gts.x.core.events.*"] is True
    assert flags["gts.x.core.events.type.v1~"] is False


def test_keys_are_scanned_only_when_requested() -> None:
    keyed = [c for c in _scan(SCHEMA, scan_keys=True) if c.raw == "gts.x.core.keyed.type.v1~"]

    assert len(keyed) == 1
    assert keyed[0].json_path == '$["gts.x.core.keyed.type.v1~"]'
    assert keyed[0].line == 8
    assert all(c.raw != "gts.x.core.keyed.type.v1~" for c in _scan(SCHEMA))


def test_invalid_json_is_skipped_with_a_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        assert _scan('{"$id": "gts.x.core.events.type.v1~",') == []

    assert "unparseable JSON" in caplog.text


def test_json_file_findings_carry_json_path() -> None:
    report = validate_text(SCHEMA, file_id="schemas/event.schema.json")

    assert [(f.reason, f.json_path, f.line) for f in report.findings] == [
        (Reason.MALFORMED_IDENTIFIER, '$["weird key"]', 9),
    ]


def test_wildcard_outside_pattern_context_is_malformed() -> None:
    text = json.dumps({"$ref": "gts.x.core.*"})
    report = validate_text(text, file_id="ref.json")

    assert len(report.findings) == 1
    assert report.findings[0].message == "Wildcards (*) are only allowed in pattern contexts"


def test_child_path_formats_keys_and_indexes() -> None:
    assert child_path("$", "a") == "$.a"
    assert child_path("$.a", 0) == "$.a[0]"
    assert child_path("$", "x-gts-ref") == "$.x-gts-ref"
    assert child_path("$", "weird key") == '$["weird key"]'


def test_deeply_nested_json_is_skipped_with_a_warning(caplog) -> None:
    depth = 100_000
    text = '{"id": "gts.bad", "x": ' + "[" * depth + "]" * depth + "}"

    with caplog.at_level(logging.WARNING):
        report = validate_text(text, file_id="deep.json")

    assert report.scanned_files == 1
    assert report.identifiers_found() == 0
    assert report.ok
    assert "nested too deeply" in caplog.text
