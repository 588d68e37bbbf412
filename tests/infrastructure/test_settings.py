"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from storefront.infrastructure.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PORT", "STOREFRONT_PORT", "STOREFRONT_DATA_FILE", "STOREFRONT_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.data_file == Path("data") / "dados.json"
    assert settings.port == 3000
    assert settings.cors_origins == ["*"]


def test_prefixed_environment(monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_FILE", "/srv/shop.json")
    monkeypatch.setenv("STOREFRONT_PORT", "8081")
    settings = Settings(_env_file=None)
    assert settings.data_file == Path("/srv/shop.json")
    assert settings.port == 8081


def test_plain_port_variable(monkeypatch):
    monkeypatch.setenv("PORT", "5000")
    assert Settings(_env_file=None).port == 5000


def test_log_format_checked(monkeypatch):
    monkeypatch.setenv("STOREFRONT_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
