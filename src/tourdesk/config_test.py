import pytest

from tourdesk.config import Config


def test_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/tourdesk")
    monkeypatch.setenv("DATABASE_CONNECT_TIMEOUT", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.database_url == "postgresql://localhost/tourdesk"
    assert config.connect_timeout == 5
    assert config.log_level == "DEBUG"
    assert config.environment == "test"


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/tourdesk")
    monkeypatch.delenv("DATABASE_CONNECT_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = Config.from_env()

    assert config.connect_timeout == 10
    assert config.log_level == "INFO"


def test_from_env_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(KeyError):
        Config.from_env()
