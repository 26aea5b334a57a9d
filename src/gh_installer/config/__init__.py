"""Configuration for gh-installer."""

from gh_installer.config.paths import Paths
from gh_installer.config.settings import Settings, SettingsManager

__all__ = ["Paths", "Settings", "SettingsManager"]
