"""Tests for lenco_momo.config."""
from lenco_momo.config import DEFAULT_BASE_URL, LencoSettings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LENCO_BASE_URL", raising=False)
    monkeypatch.delenv("LENCO_TIMEOUT", raising=False)
    settings = LencoSettings(_env_file=None)
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 30.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LENCO_BASE_URL", "https://sandbox.lenco.co/access/v2")
    monkeypatch.setenv("LENCO_TIMEOUT", "12.5")
    settings = LencoSettings(_env_file=None)
    assert settings.base_url == "https://sandbox.lenco.co/access/v2"
    assert settings.timeout == 12.5


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
