"""Tests for logger configuration module."""

from pathlib import Path

from pytest import MonkeyPatch

from gh_installer.logger.config import load_log_settings


def test_load_log_settings_with_env_var(
    monkeypatch: MonkeyPatch, tmp_path: Path
) -> None:
    """Test load_log_settings returns the test dir when the env var is set."""
    monkeypatch.setenv("GH_INSTALLER_LOG_DIR", str(tmp_path))

    console_level, file_level, log_path = load_log_settings()

    assert console_level == "WARNING"
    assert file_level == "INFO"
    assert log_path == tmp_path / "gh-installer.log"


def test_load_log_settings_without_env_var(monkeypatch: MonkeyPatch) -> None:
    """Test load_log_settings falls back to the config directory."""
    monkeypatch.delenv("GH_INSTALLER_LOG_DIR", raising=False)

    _, _, log_path = load_log_settings()

    expected_path = (
        Path.home() / ".config" / "gh-installer" / "logs" / "gh-installer.log"
    )
    assert log_path == expected_path


def test_load_log_settings_with_tilde_in_env_var(
    monkeypatch: MonkeyPatch,
) -> None:
    """Test load_log_settings expands tilde in GH_INSTALLER_LOG_DIR."""
    monkeypatch.setenv("GH_INSTALLER_LOG_DIR", "~/custom-logs")

    _, _, log_path = load_log_settings()

    assert log_path == Path.home() / "custom-logs" / "gh-installer.log"
