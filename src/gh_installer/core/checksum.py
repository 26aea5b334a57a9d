"""Checksum manifest parsing (``checksums.txt``, ``SHA256SUMS``)."""

from gh_installer.logger import get_logger

logger = get_logger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _parse_line(line: str) -> tuple[str, str] | None:
    """Parse one ``<digest> <filename>`` line.

    Args:
        line: The line to parse.

    Returns:
        A tuple of (filename, digest) or None if the line is malformed.
    """
    fields = line.split()
    if len(fields) != 2:  # noqa: PLR2004
        return None

    digest, filename = fields
    if not all(char in _HEX_DIGITS for char in digest):
        return None

    # sha256sum marks binary mode with '*'; some manifests keep './'
    filename = filename.removeprefix("*").removeprefix("./")
    if not filename:
        return None
    return filename, digest


def parse_checksum_manifest(content: str) -> dict[str, str]:
    """Build a filename → digest index from a checksum manifest.

    Malformed lines are skipped.

    Args:
        content: Manifest text

    Returns:
        Mapping of asset filename to hex digest

    """
    index: dict[str, str] = {}
    skipped = 0
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        parsed = _parse_line(line)
        if parsed is None:
            skipped += 1
            continue
        filename, digest = parsed
        index[filename] = digest

    if skipped:
        logger.debug("Skipped %d malformed checksum lines", skipped)
    return index
