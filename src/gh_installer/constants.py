"""Centralized constants module for gh-installer.

This module serves as the single source of truth for shared constants
across the gh-installer codebase. Constants are organized by logical
categories and use typing.Final annotations to ensure immutability.

Usage:
    from gh_installer.constants import OS_DARWIN
"""

from typing import Final

# =============================================================================
# Platform Tokens
# =============================================================================

OS_DARWIN: Final[str] = "darwin"
OS_DRAGONFLY: Final[str] = "dragonfly"
OS_LINUX: Final[str] = "linux"
OS_WINDOWS: Final[str] = "windows"

ARCH_AMD64: Final[str] = "amd64"
ARCH_386: Final[str] = "386"
ARCH_ARM: Final[str] = "arm"
ARCH_ARM64: Final[str] = "arm64"
ARCH_LOONG64: Final[str] = "loong64"
ARCH_PPC64: Final[str] = "ppc64"
ARCH_PPC64LE: Final[str] = "ppc64le"
ARCH_RISCV64: Final[str] = "riscv64"
ARCH_S390X: Final[str] = "s390x"

# =============================================================================
# Asset Selection Constants
# =============================================================================

# Archive and binary types an install script knows how to unpack
SUPPORTED_FILE_TYPES: Final[frozenset[str]] = frozenset(
    {
        ".bin",
        ".zip",
        ".tar.bz",
        ".tar.bz2",
        ".bz2",
        ".gz",
        ".tar.gz",
        ".tgz",
    }
)

# Extension-less assets above this size are assumed to be bare binaries
BARE_BINARY_MIN_SIZE: Final[int] = 1024 * 1024  # 1 MB
BARE_BINARY_TYPE: Final[str] = ".bin"

# Checksum manifests are small text files; larger matches are real assets
CHECKSUM_FILE_MAX_SIZE: Final[int] = 64 * 1024  # 64 KB
CHECKSUM_FILE_MARKERS: Final[tuple[str, ...]] = ("checksums", "sha256sums")

LIBC_MUSL: Final[str] = "musl"
LIBC_GNU: Final[str] = "gnu"

# =============================================================================
# Query Constants
# =============================================================================

LATEST_RELEASE: Final[str] = "latest"

# Programs whose owner is known when the request omits it
DEFAULT_OWNER_OVERRIDES: Final[dict[str, str]] = {
    "micro": "zyedidia",
}

# =============================================================================
# Network Constants
# =============================================================================

GITHUB_API_URL: Final[str] = "https://api.github.com"
# Where a request for the bare root path is redirected
PROJECT_URL: Final[str] = "https://github.com/jpillora/installer"
GITHUB_ACCEPT_HEADER: Final[str] = "application/vnd.github.v3+json"
HTTP_NOT_FOUND: Final[int] = 404

# Remaining-request count below which a rate limit warning is logged
RATE_LIMIT_WARNING_THRESHOLD: Final[int] = 10

SEARCH_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_3) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/81.0.4044.122 Safari/537.36"
)
SEARCH_SITE_SUFFIX: Final[str] = " site:github.com"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
DEFAULT_CONFIG_SUBDIR: Final[str] = ".config"
CONFIG_DIR_NAME: Final[str] = "gh-installer"

DEFAULT_HOST: Final[str] = "0.0.0.0"  # noqa: S104
DEFAULT_PORT: Final[int] = 3000
DEFAULT_USER: Final[str] = "jpillora"
DEFAULT_CACHE_TTL_SECONDS: Final[int] = 60 * 60
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_SERVER: Final[str] = "server"

KEY_DEFAULT_USER: Final[str] = "default_user"
KEY_FORCE_USER: Final[str] = "force_user"
KEY_FORCE_REPO: Final[str] = "force_repo"
KEY_CACHE_TTL: Final[str] = "cache_ttl_seconds"
KEY_SEARCH_ENABLED: Final[str] = "search_enabled"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_FILE_LOGGING: Final[str] = "file_logging"
KEY_TOKEN: Final[str] = "token"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_HOST: Final[str] = "host"
KEY_PORT: Final[str] = "port"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3
LOG_FILE_NAME: Final[str] = "gh-installer.log"

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
