import pytest

from gts_validator.config import get_settings
from gts_validator.core.config import (
    DEFAULT_MAX_FILE_SIZE,
    FsSourceConfig,
    MustMatch,
    Unconstrained,
    ValidationConfig,
    config_from_env,
    vendor_policy_for,
)


def test_validation_config_defaults() -> None:
    config = ValidationConfig()

    assert isinstance(config.vendor_policy, Unconstrained)
    assert config.strict is False
    assert config.scan_keys is False
    assert config.skip_tokens == ()
    assert config.grammar == "gts-1"
    assert FsSourceConfig().max_file_size == DEFAULT_MAX_FILE_SIZE == 10 * 1024 * 1024


def test_vendor_policies() -> None:
    assert Unconstrained().allows("anything")
    assert MustMatch("acme").allows("acme")
    assert not MustMatch("acme").allows("Acme")
    assert MustMatch("acme").allows(None)
    assert vendor_policy_for(None) == Unconstrained()
    assert vendor_policy_for(" acme ") == MustMatch("acme")
    with pytest.raises(ValueError):
        MustMatch("")


@pytest.mark.parametrize("vendor", ["", "   "])
def test_blank_vendor_is_rejected_not_unconstrained(vendor: str) -> None:
    with pytest.raises(ValueError, match="non-empty"):
        vendor_policy_for(vendor)


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GTS_VALIDATOR_VENDOR", "acme")
    monkeypatch.setenv("GTS_VALIDATOR_STRICT", "yes")

    config = config_from_env(skip_tokens=("legacy",))

    assert config.vendor_policy == MustMatch("acme")
    assert config.strict is True
    assert config.skip_tokens == ("legacy",)
    assert config_from_env(strict=False).strict is False


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("APP_NAME", "Validator Test")
    monkeypatch.setenv("LOG_VERBOSITY", "LOUD")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, ,https://b.example")
    monkeypatch.setenv("GTS_VALIDATOR_MAX_DOCUMENTS", "0")
    monkeypatch.setenv("GTS_VALIDATOR_URL_TIMEOUT", "5")
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.app_name == "Validator Test"
    assert settings.log_verbosity == "medium"
    assert settings.cors_allow_origins == ("https://a.example", "https://b.example")
    assert settings.max_documents == 500
    assert settings.url_timeout == 5


def test_config_from_env_treats_empty_vendor_variable_as_unset(monkeypatch) -> None:
    monkeypatch.setenv("GTS_VALIDATOR_VENDOR", "")

    assert config_from_env().vendor_policy == Unconstrained()
