from gts_validator.core.grammar import (
    GTS_GRAMMAR_V1,
    MAX_IDENTIFIER_LENGTH,
    explain,
    find_candidates,
    is_well_formed,
    vendor_segment,
)


def test_schema_identifier_is_well_formed() -> None:
    assert is_well_formed("gts.x.core.events.type.v1~")
    assert is_well_formed("gts.x.core.events.type.v1.0~")
    assert is_well_formed("gts.acme.billing.invoices.invoice.v12.3~")


def test_chained_schema_identifier_is_well_formed() -> None:
    assert is_well_formed("gts.x.core.events.type.v1~acme.commerce.orders.order_placed.v1.0~")


def test_instance_identifier_is_well_formed() -> None:
    assert is_well_formed("gts.x.core.events.type.v1~acme.orders.order.instance_01")
    assert is_well_formed("gts.x.core.events.type.v1~7a1d2f34")


def test_single_segment_without_tilde_is_malformed() -> None:
    assert explain("gts.x.core.events.type.v1") == "Schema identifiers must end with '~'"


def test_hyphen_is_illegal() -> None:
    assert explain("gts.x.core.my-events.type.v1~") == "Segment 1 contains illegal character '-'"


def test_uppercase_is_illegal() -> None:
    assert explain("gts.x.Core.events.type.v1~") == "Segment 1 contains illegal character 'C'"


def test_too_few_parts_are_reported_with_count() -> None:
    assert explain("gts.x.core.v1~") == (
        "Segment 1 needs 5 parts (vendor.package.namespace.type.version), found 3"
    )


def test_version_must_not_have_leading_zeros() -> None:
    assert explain("gts.x.core.events.type.v01~") == (
        "Segment 1 version 'v01' must look like v<MAJOR>[.<MINOR>]"
    )
    assert not is_well_formed("gts.x.core.events.type.v1.01~")
    assert is_well_formed("gts.x.core.events.type.v0.0~")


def test_names_cannot_start_with_a_digit() -> None:
    assert explain("gts.9x.core.events.type.v1~") == "Segment 1 vendor '9x' is not a valid name"


def test_second_segment_errors_are_numbered() -> None:
    message = explain("gts.x.core.events.type.v1~acme.orders~")
    assert message is not None
    assert message.startswith("Segment 2 needs 5 parts")


def test_prefix_is_required() -> None:
    assert explain("x.core.events.type.v1~") == "Identifier must start with 'gts.'"
    assert explain("") == "Empty identifier"


def test_identifier_length_is_bounded() -> None:
    too_long = "gts." + "a" * MAX_IDENTIFIER_LENGTH
    assert explain(too_long) == f"Identifier exceeds {MAX_IDENTIFIER_LENGTH} characters"


def test_wildcards_require_pattern_context() -> None:
    assert explain("gts.x.core.events.*") == "Wildcards (*) are only allowed in pattern contexts"
    assert is_well_formed("gts.x.core.events.*", allow_wildcards=True)
    assert is_well_formed("gts.x.core.events.type.v1~*", allow_wildcards=True)
    assert is_well_formed("gts.*", allow_wildcards=True)


def test_wildcard_must_be_single_and_last() -> None:
    assert not is_well_formed("gts.x.*.events.*", allow_wildcards=True)
    assert not is_well_formed("gts.x.*.events", allow_wildcards=True)
    assert not is_well_formed("gts.x.core.ev*", allow_wildcards=True)


def test_vendor_segment_comes_from_first_segment() -> None:
    assert vendor_segment("gts.acme.core.events.type.v1~other.core.events.type.v1~") == "acme"
    assert vendor_segment("gts.acme.core.*") == "acme"
    assert vendor_segment("gts.*") is None
    assert vendor_segment("gts.acme.core") is None


def test_find_candidates_locates_tokens_in_prose() -> None:
    text = "Use gts.x.core.events.type.v1~ or `gts://gts.acme.a.b.c.v1~`, not notgts.x."
    spans = list(find_candidates(text))

    assert [span.raw for span in spans] == ["gts.x.core.events.type.v1~", "gts://gts.acme.a.b.c.v1~"]
    assert text[spans[0].start : spans[0].end] == spans[0].raw


def test_find_candidates_ignores_path_and_url_fragments() -> None:
    text = "see https://example.com/gts.x.core.events.type.v1~ and docs/gts.schema.json"
    assert list(find_candidates(text)) == []


def test_looks_like_identifier() -> None:
    assert GTS_GRAMMAR_V1.looks_like_identifier("  gts.x.core.events.type.v1~")
    assert GTS_GRAMMAR_V1.looks_like_identifier("GTS://gts.x")
    assert not GTS_GRAMMAR_V1.looks_like_identifier("x.gts.core")
