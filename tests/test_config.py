from __future__ import annotations

import pytest

from pyentitystore.config import DEFAULT_ERROR_MESSAGE, Configuration


def test_defaults() -> None:
    config = Configuration()

    assert config.base_url == "http://localhost:8000"
    assert config.headers == {}
    assert config.timeout == 30.0
    assert config.default_error_message == DEFAULT_ERROR_MESSAGE


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENTITYSTORE_BASE_URL", "https://api.example.test/")
    monkeypatch.setenv("ENTITYSTORE_TIMEOUT", "5")
    monkeypatch.setenv("ENTITYSTORE_DEFAULT_ERROR_MESSAGE", "Unbekannter Fehler")

    config = Configuration.from_env()

    assert config.base_url == "https://api.example.test"
    assert config.timeout == 5.0
    assert config.default_error_message == "Unbekannter Fehler"


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENTITYSTORE_BASE_URL", "https://env.example.test")
    monkeypatch.setenv("ENTITYSTORE_TIMEOUT", "not-a-number")

    config = Configuration.from_env(base_url="https://override.example.test", timeout=2.5)

    assert config.base_url == "https://override.example.test"
    assert config.timeout == 2.5


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENTITYSTORE_BASE_URL", "ENTITYSTORE_TIMEOUT", "ENTITYSTORE_DEFAULT_ERROR_MESSAGE"):
        monkeypatch.delenv(name, raising=False)

    assert Configuration.from_env() == Configuration()
