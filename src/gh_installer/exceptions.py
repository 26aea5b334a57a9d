"""Exception classes for gh-installer operations."""


class InstallerError(Exception):
    """Base exception for gh-installer operations."""

    error_prefix: str = "Resolution failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class InvalidQueryError(InstallerError):
    """Raised when a request does not name a program."""

    error_prefix = "Invalid query"


class NotFoundError(InstallerError):
    """Raised when the release API answers 404 for a repository."""

    error_prefix = "not found"

    def __init__(self, url: str) -> None:
        """Initialize with the URL that was not found.

        Args:
            url: API URL that returned 404.

        """
        super().__init__(f"url {url}")
        self.url = url


class ReleaseTagNotFoundError(InstallerError):
    """Raised when a repository has no release with the requested tag."""

    error_prefix = "Release not found"

    def __init__(self, tag: str, target: str | None = None) -> None:
        """Initialize with the missing tag.

        Args:
            tag: Requested release tag.
            target: Repository slug the tag was looked up in.

        """
        super().__init__(f"release tag '{tag}' not found", target)
        self.tag = tag


class UpstreamError(InstallerError):
    """Raised for non-2xx responses or transport failures upstream."""

    error_prefix = "Upstream error"

    def __init__(self, status: int, reason: str, body: str = "") -> None:
        """Initialize with the upstream status line and body.

        Args:
            status: HTTP status code (0 for transport failures).
            reason: Status text or transport error description.
            body: Response body, if any.

        """
        message = f"{reason} {body}".strip()
        super().__init__(message)
        self.status = status
        self.reason = reason
        self.body = body


class NoAssetsError(InstallerError):
    """Raised when a release offers nothing installable."""

    error_prefix = "No downloads available"


class SearchFallbackError(InstallerError):
    """Raised when no search backend yields a repository redirect."""

    error_prefix = "Search failed"


class ConfigurationError(InstallerError):
    """Raised for invalid settings values."""

    error_prefix = "Configuration error"
