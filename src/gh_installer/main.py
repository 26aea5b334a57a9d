"""Console entry point for ``gh-installer``.

Runs the resolver CLI (``resolve`` for one-shot lookups, ``serve`` for
the HTTP service) on a uvloop event loop.
"""

import sys

import uvloop

from gh_installer.cli import CLIRunner
from gh_installer.logger import get_logger

logger = get_logger(__name__)


async def async_main(argv: list[str] | None = None) -> None:
    """Parse ``argv`` and run the selected command to completion."""
    await CLIRunner().run(argv)


def main() -> None:
    """Run the CLI, exiting with status 1 on interrupt or crash."""
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        # Ctrl+C is how ``serve`` is normally stopped
        logger.info("Interrupted, shutting down")
        sys.exit(1)
    except Exception:
        logger.exception("gh-installer failed with an unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
