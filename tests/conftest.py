"""Pytest configuration and fixtures for gh-installer tests."""

import logging

import pytest

from gh_installer.config import Settings
from gh_installer.core.github.models import ReleaseAsset

BINARY_SIZE = 5 * 1024 * 1024


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("gh_installer"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path, monkeypatch):
    """Keep any file logging inside the test's temporary directory."""
    monkeypatch.setenv("GH_INSTALLER_LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture
def make_assets():
    """Factory for raw release assets hosted under a fake download URL."""

    def _make(*names: str, size: int = BINARY_SIZE) -> list[ReleaseAsset]:
        return [
            ReleaseAsset(
                name=name,
                browser_download_url=(
                    f"https://github.com/o/r/releases/download/v1/{name}"
                ),
                size=size,
            )
            for name in names
        ]

    return _make


@pytest.fixture
def settings():
    """Default settings with a known default user."""
    return Settings(default_user="jpillora")
