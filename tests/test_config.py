import pytest

from habit_tracker.core.config import DEFAULT_TIMEZONE, load_config, normalize_database_url


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://user:pw@db:5432/tracker")
    monkeypatch.setenv("TRACKER_API_TOKEN", "  s3cret  ")
    monkeypatch.setenv("TRACKER_TIMEZONE", "UTC")
    monkeypatch.setenv("TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TRACKER_AUTO_MIGRATE", "false")

    config = load_config()

    assert config.database_url == "postgresql+psycopg2://user:pw@db:5432/tracker"
    assert config.api_token == "s3cret"
    assert config.timezone == "UTC"
    assert config.log_level == "DEBUG"
    assert config.auto_migrate is False


def test_load_config_defaults(monkeypatch):
    for name in ("DATABASE_URL", "TRACKER_API_TOKEN", "TRACKER_TIMEZONE", "TRACKER_AUTO_MIGRATE"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.api_token is None
    assert config.timezone == DEFAULT_TIMEZONE
    assert config.auto_migrate is True


def test_blank_token_is_treated_as_unset(monkeypatch):
    monkeypatch.setenv("TRACKER_API_TOKEN", "   ")

    assert load_config().api_token is None


def test_non_postgres_url_is_rejected():
    with pytest.raises(ValueError):
        normalize_database_url("sqlite:///tracker.db")
