from gts_validator.core import validate_documents
from gts_validator.logging import report_to_loggable


def _build_sample_report():
    documents = [(f"docs/f{index:02d}.md", f"gts.bad{index} " + "x" * 10) for index in range(12)]
    documents.append(("docs/clean.md", "gts.acme.core.events.type.v1~"))
    return validate_documents(documents)


def test_report_to_loggable_returns_none_when_debug_disabled() -> None:
    assert report_to_loggable(_build_sample_report(), verbosity="high", debug_enabled=False) is None


def test_report_to_loggable_respects_debug_setting(monkeypatch) -> None:
    from gts_validator.config import get_settings

    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("LOG_VERBOSITY", "low")
    get_settings.cache_clear()
    try:
        loggable = report_to_loggable(_build_sample_report())
    finally:
        get_settings.cache_clear()

    assert loggable is not None
    assert "findings" not in loggable


def test_report_to_loggable_extrahigh_is_full_report() -> None:
    report = _build_sample_report()

    loggable = report_to_loggable(report, verbosity="extrahigh", debug_enabled=True)

    assert loggable == report.to_dict()
    assert len(loggable["scan_records"]) == 13


def test_report_to_loggable_high_has_all_findings_without_scan_records() -> None:
    loggable = report_to_loggable(_build_sample_report(), verbosity="high", debug_enabled=True)

    assert len(loggable["findings"]) == 12
    assert "scan_records" not in loggable
    assert loggable["reasons"] == {"MalformedIdentifier": 12}


def test_report_to_loggable_medium_truncates_findings() -> None:
    loggable = report_to_loggable(_build_sample_report(), verbosity="medium", debug_enabled=True)

    assert len(loggable["findings"]) == 10
    assert loggable["findings_truncated"] == 2
    assert loggable["findings"][0]["location"] == "docs/f00.md:1"
    assert set(loggable["findings"][0]) == {"location", "reason", "identifier", "message"}


def test_report_to_loggable_low_is_counts_only() -> None:
    loggable = report_to_loggable(_build_sample_report(), verbosity="low", debug_enabled=True)

    assert loggable == {
        "scanned_files": 13,
        "ok": False,
        "errors_count": 12,
        "warnings_count": 0,
        "identifiers_found": 13,
        "reasons": {"MalformedIdentifier": 12},
    }


def test_report_to_loggable_unknown_verbosity_falls_back_to_medium() -> None:
    loggable = report_to_loggable(_build_sample_report(), verbosity="chatty", debug_enabled=True)

    assert loggable["findings_truncated"] == 2
