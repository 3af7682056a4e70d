"""Tests for settings defaults and environment overrides."""

from dashboard.config.settings import Settings, get_settings, reset_settings, set_settings


def test_defaults():
    settings = Settings()

    assert settings.quote_cache_ttl_seconds == 300
    assert settings.quote_fetch_timeout_seconds == 3.0
    assert settings.exchange_suffix == ".NS"
    assert settings.recognized_suffixes == [".NS", ".BO"]
    assert set(settings.unavailable_symbols) == {"SAVANI", "BAJAJHLDNG", "GENSOL"}
    assert settings.refresh_interval_seconds == 15


def test_environment_override(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "secret")
    monkeypatch.setenv("QUOTE_CACHE_TTL_SECONDS", "60")
    reset_settings()

    settings = get_settings()

    assert settings.alpha_vantage_api_key == "secret"
    assert settings.quote_cache_ttl_seconds == 60


def test_set_settings():
    custom = Settings(app_name="Custom")
    set_settings(custom)

    assert get_settings() is custom
