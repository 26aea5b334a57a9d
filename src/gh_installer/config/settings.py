"""Settings model and INI/environment loader.

Settings come from three layers, later layers winning:

1. Built-in defaults (``gh_installer.constants``)
2. ``settings.conf`` in the config directory (INI, optional)
3. Environment variables

Example ``settings.conf``::

    [DEFAULT]
    default_user = jpillora
    cache_ttl_seconds = 3600

    [network]
    timeout_seconds = 10

    [server]
    port = 3000
"""

import configparser
import os
from dataclasses import dataclass, replace
from pathlib import Path

from gh_installer.config.paths import Paths
from gh_installer.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER,
    KEY_CACHE_TTL,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DEFAULT_USER,
    KEY_FILE_LOGGING,
    KEY_FORCE_REPO,
    KEY_FORCE_USER,
    KEY_HOST,
    KEY_LOG_LEVEL,
    KEY_PORT,
    KEY_SEARCH_ENABLED,
    KEY_TIMEOUT_SECONDS,
    KEY_TOKEN,
    SECTION_DEFAULT,
    SECTION_NETWORK,
    SECTION_SERVER,
)
from gh_installer.exceptions import ConfigurationError
from gh_installer.logger import get_logger

logger = get_logger(__name__)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime settings for resolution, transport and the HTTP server.

    Attributes:
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        default_user: Owner used when a request names only a program
        token: GitHub API token (empty for anonymous access)
        force_user: When set, overrides every parsed owner
        force_repo: When set, overrides every parsed program
        cache_ttl_seconds: Result cache TTL; 0 disables caching
        timeout_seconds: Total timeout applied to outbound requests
        search_enabled: Whether the web-search fallback may be used
        log_level: File log level
        console_log_level: Console log level
        file_logging: Whether a rotating log file is written

    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    default_user: str = DEFAULT_USER
    token: str = ""
    force_user: str = ""
    force_repo: str = ""
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    search_enabled: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    file_logging: bool = False


def _parse_int(key: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from e
    if value < 0:
        msg = f"{key} must not be negative, got {value}"
        raise ConfigurationError(msg)
    return value


def _parse_bool(key: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    msg = f"{key} must be a boolean, got {raw!r}"
    raise ConfigurationError(msg)


def _parse_level(key: str, raw: str) -> str:
    level = raw.strip().upper()
    if level not in _VALID_LOG_LEVELS:
        msg = f"{key} must be one of {', '.join(_VALID_LOG_LEVELS)}"
        raise ConfigurationError(msg)
    return level


class SettingsManager:
    """Loads Settings from the INI file and the environment."""

    def __init__(
        self,
        config_dir: Path | None = None,
        environ: dict[str, str] | None = None,
    ) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path (defaults to
                ``GH_INSTALLER_CONFIG_DIR`` or Paths.CONFIG_DIR)
            environ: Environment mapping (defaults to os.environ)

        """
        self.environ = dict(os.environ) if environ is None else environ
        env_dir = self.environ.get("GH_INSTALLER_CONFIG_DIR")
        if config_dir is None:
            config_dir = (
                Path(env_dir).expanduser() if env_dir else Paths.CONFIG_DIR
            )
        self.config_dir = config_dir
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def load(self) -> Settings:
        """Load settings from file and environment.

        Returns:
            Fully resolved Settings

        Raises:
            ConfigurationError: If a value cannot be parsed

        """
        settings = self._load_file(Settings())
        return self._apply_environment(settings)

    def _load_file(self, settings: Settings) -> Settings:
        if not self.settings_file.exists():
            logger.debug(
                "No settings file at %s, using defaults", self.settings_file
            )
            return settings

        parser = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except configparser.Error as e:
            msg = f"cannot parse {self.settings_file}: {e}"
            raise ConfigurationError(msg) from e

        defaults = parser[SECTION_DEFAULT]
        changes: dict[str, object] = {}
        for key in (
            KEY_DEFAULT_USER,
            KEY_FORCE_USER,
            KEY_FORCE_REPO,
            KEY_TOKEN,
        ):
            if key in defaults:
                changes[key] = defaults[key].strip()
        if KEY_CACHE_TTL in defaults:
            changes[KEY_CACHE_TTL] = _parse_int(
                KEY_CACHE_TTL, defaults[KEY_CACHE_TTL]
            )
        if KEY_SEARCH_ENABLED in defaults:
            changes[KEY_SEARCH_ENABLED] = _parse_bool(
                KEY_SEARCH_ENABLED, defaults[KEY_SEARCH_ENABLED]
            )
        if KEY_FILE_LOGGING in defaults:
            changes[KEY_FILE_LOGGING] = _parse_bool(
                KEY_FILE_LOGGING, defaults[KEY_FILE_LOGGING]
            )
        for key in (KEY_LOG_LEVEL, KEY_CONSOLE_LOG_LEVEL):
            if key in defaults:
                changes[key] = _parse_level(key, defaults[key])

        if parser.has_section(SECTION_NETWORK):
            network = parser[SECTION_NETWORK]
            if KEY_TIMEOUT_SECONDS in network:
                changes[KEY_TIMEOUT_SECONDS] = _parse_int(
                    KEY_TIMEOUT_SECONDS, network[KEY_TIMEOUT_SECONDS]
                )

        if parser.has_section(SECTION_SERVER):
            server = parser[SECTION_SERVER]
            if KEY_HOST in server:
                changes[KEY_HOST] = server[KEY_HOST].strip()
            if KEY_PORT in server:
                changes[KEY_PORT] = _parse_int(KEY_PORT, server[KEY_PORT])

        logger.debug("Loaded settings from %s", self.settings_file)
        return replace(settings, **changes)

    def _apply_environment(self, settings: Settings) -> Settings:
        env = self.environ
        changes: dict[str, object] = {}

        if env.get("HTTP_HOST"):
            changes[KEY_HOST] = env["HTTP_HOST"]
        if env.get("PORT"):
            changes[KEY_PORT] = _parse_int("PORT", env["PORT"])
        if env.get("GH_INSTALLER_USER"):
            changes[KEY_DEFAULT_USER] = env["GH_INSTALLER_USER"]
        token = env.get("GITHUB_TOKEN") or env.get("GH_TOKEN")
        if token:
            changes[KEY_TOKEN] = token
        if env.get("GH_INSTALLER_CACHE_TTL"):
            changes[KEY_CACHE_TTL] = _parse_int(
                "GH_INSTALLER_CACHE_TTL", env["GH_INSTALLER_CACHE_TTL"]
            )

        return replace(settings, **changes) if changes else settings
