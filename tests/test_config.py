"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from minidi.core.config import load_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test sees a fresh settings instance."""

    load_app_settings.cache_clear()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.container.detect_cycles is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.structured is False


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "MINIDI_CONTAINER__DETECT_CYCLES=true\nMINIDI_LOGGING__LEVEL=DEBUG\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.container.detect_cycles is True
    assert settings.logging.level == "DEBUG"


def test_environment_beats_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Process environment variables take precedence over the env file."""

    env_file = tmp_path / "test.env"
    env_file.write_text("MINIDI_LOGGING__LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("MINIDI_LOGGING__LEVEL", "ERROR")

    settings = load_app_settings(env_file=env_file)
    assert settings.logging.level == "ERROR"


def test_missing_env_file_ignored(tmp_path: Path) -> None:
    settings = load_app_settings(
        env_file=tmp_path / "absent.env", include_environment=False
    )
    assert settings.logging.level == "WARNING"
