"""Filename classification for release assets.

Release files are named with no common convention, so the OS and CPU
architecture are recovered from free-form filenames such as
``uv-x86_64-unknown-linux-musl.tar.gz`` or ``croc_v10.2.4_macOS-ARM64.tar.gz``.

Separators in release names are ``_``, ``-`` and ``.`` interchangeably,
and ``\\b`` treats ``_`` as a word character, so token boundaries are
spelled out as ``(?:^|[^a-z0-9])`` and ``(?:[^a-z0-9]|$)``. All matching
happens on the lowercased name.

Every function here is pure: the same filename always yields the same
tokens, and an empty string means "no confident match".
"""

import re

from gh_installer.constants import (
    ARCH_386,
    ARCH_AMD64,
    ARCH_ARM,
    ARCH_ARM64,
    ARCH_LOONG64,
    ARCH_PPC64,
    ARCH_PPC64LE,
    ARCH_RISCV64,
    ARCH_S390X,
    CHECKSUM_FILE_MARKERS,
    CHECKSUM_FILE_MAX_SIZE,
    OS_DARWIN,
    OS_DRAGONFLY,
    OS_WINDOWS,
)

_START = r"(?:^|[^a-z0-9])"
_END = r"(?:[^a-z0-9]|$)"

# OS patterns, in precedence order. Darwin, dragonfly and windows are
# prefix matches so "macos", "dragonflybsd" and "win64" are recognized.
_OS_PATTERNS: tuple[tuple[re.Pattern[str], str | None], ...] = (
    (re.compile(_START + r"(darwin|mac|osx)"), OS_DARWIN),
    (re.compile(_START + r"(dragonfly)"), OS_DRAGONFLY),
    (re.compile(_START + r"(win)"), OS_WINDOWS),
    (
        re.compile(
            _START
            + r"(aix|android|illumos|ios|linux"
            + r"|(?:free|net|open)bsd|plan9|solaris)"
            + _END
        ),
        None,
    ),
)

# Architecture patterns, most specific first: several tokens are textual
# substrings of others (ppc64 / ppc64le, arm / arm64, 64 / x86_64).
_ARCH_PATTERNS: tuple[tuple[re.Pattern[str], str | None], ...] = (
    (re.compile(r"(loong64|loongarch64)" + _END), ARCH_LOONG64),
    (re.compile(r"(ppc64|powerpc64)" + _END), ARCH_PPC64),
    (re.compile(r"(ppc64le|powerpc64le|ppcle_64)" + _END), ARCH_PPC64LE),
    (re.compile(r"(riscv64)"), ARCH_RISCV64),
    (re.compile(r"(arm64|aarch64|aarch_64)" + _END), ARCH_ARM64),
    (re.compile(r"(amd64|x86_64)" + _END), ARCH_AMD64),
    # armv5/6/7, arm32, armel, armhf, armv7l; never inside "marmite"
    (re.compile(_START + r"(arm(?:v[567]|32)?[eh]?[fl]?)" + _END), ARCH_ARM),
    (re.compile(r"(386|686|x86_32)" + _END), ARCH_386),
    (
        re.compile(
            _START + r"(mips64le|mips64|mipsle|mips|s390x|s390_64|wasm)" + _END
        ),
        None,
    ),
    (re.compile(r"(x?64(?:bit)?)\b"), ARCH_AMD64),
    (re.compile(r"(x?32(?:bit)?|x86)\b"), ARCH_386),
)

_ARCH_ALIASES = {"s390_64": ARCH_S390X}

_FILE_EXT_RE = re.compile(r"(\.tar)?(\.[a-z][a-z0-9]+)$")


def _classify(
    filename: str,
    patterns: tuple[tuple[re.Pattern[str], str | None], ...],
) -> str:
    lowered = filename.lower()
    for pattern, token in patterns:
        match = pattern.search(lowered)
        if match:
            return token if token is not None else match.group(1)
    return ""


def classify_os(filename: str) -> str:
    """Return the normalized OS token for a release filename.

    Args:
        filename: Asset filename

    Returns:
        One of ``darwin``, ``dragonfly``, ``windows`` or a verbatim POSIX
        token (``linux``, ``freebsd``, ...); empty when unknown

    """
    return _classify(filename, _OS_PATTERNS)


def classify_arch(filename: str) -> str:
    """Return the normalized architecture token for a release filename.

    Args:
        filename: Asset filename

    Returns:
        Go-style architecture token (``amd64``, ``arm64``, ``386``, ...);
        empty when unknown

    """
    arch = _classify(filename, _ARCH_PATTERNS)
    return _ARCH_ALIASES.get(arch, arch)


def classify_file_extension(name: str) -> str:
    """Return the trailing extension, keeping ``.tar.<ext>`` as one unit.

    Args:
        name: Download URL or filename

    Returns:
        Extension such as ``.tar.gz`` or ``.zip``; empty if none

    """
    match = _FILE_EXT_RE.search(name)
    return match.group(0) if match else ""


def classify_checksum_file(filename: str, size: int) -> bool:
    """Check whether an asset looks like a checksum manifest.

    Args:
        filename: Asset filename
        size: Asset size in bytes

    Returns:
        True for small files named like ``checksums.txt`` or ``SHA256SUMS``

    """
    lowered = filename.lower()
    if not any(marker in lowered for marker in CHECKSUM_FILE_MARKERS):
        return False
    return size < CHECKSUM_FILE_MAX_SIZE
