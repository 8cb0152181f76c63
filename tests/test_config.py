"""Tests for application settings."""

from nutrition_calculator.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings(_env_file=None)

    assert settings.debug is False


def test_settings_reads_debug_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.debug is True


def test_settings_only_declares_debug() -> None:
    assert set(Settings.model_fields) == {"debug"}


def test_settings_reads_env_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setenv("ENVIRONMENT", "staging")
    env_file = tmp_path / ".env.staging"
    env_file.write_text("DEBUG=true\nENVIRONMENT=staging\n")

    settings = Settings(_env_file=env_file)

    assert settings.debug is True
