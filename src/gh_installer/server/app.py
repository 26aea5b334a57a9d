"""HTTP front end for the resolver.

Routes:
    GET /healthz, /favicon.ico   → ``OK``
    GET /[owner/]program[@release][!]?type=text|json&select=...
"""

from aiohttp import web

from gh_installer.config import Settings
from gh_installer.constants import PROJECT_URL
from gh_installer.core.query import parse_request_path
from gh_installer.core.render import render_json, render_text, sanitize_error
from gh_installer.core.resolver import Resolver
from gh_installer.exceptions import InstallerError, InvalidQueryError
from gh_installer.logger import get_logger

logger = get_logger(__name__)

SETTINGS_KEY = web.AppKey("settings", Settings)
RESOLVER_KEY = web.AppKey("resolver", Resolver)

_HEALTH_PATHS = frozenset({"/healthz", "/favicon.ico"})
_OUTPUT_TYPES = frozenset({"json", "text"})


def _error_response(message: str, status: int) -> web.Response:
    return web.Response(text=sanitize_error(message), status=status)


async def handle_install(request: web.Request) -> web.Response:
    """Resolve the request path and render the result."""
    if request.path in _HEALTH_PATHS:
        return web.Response(text="OK")

    output_type = request.query.get("type") or "text"
    if output_type not in _OUTPUT_TYPES:
        return _error_response("Unknown type", 400)

    settings = request.app[SETTINGS_KEY]
    resolver = request.app[RESOLVER_KEY]

    try:
        query = parse_request_path(request.path, request.query, settings)
    except InvalidQueryError as e:
        if not request.path.strip("/"):
            raise web.HTTPMovedPermanently(PROJECT_URL) from e
        logger.info("Invalid path %s: %s", request.path, e)
        return _error_response("Invalid path", 400)

    if not settings.search_enabled:
        query = query.without_search()

    try:
        result = await resolver.resolve(query)
    except InstallerError as e:
        logger.warning("Resolving %s failed: %s", request.path, e)
        return _error_response(str(e), 502)

    logger.info(
        "Serving %s@%s (%s)",
        result.query.slug,
        result.resolved_release,
        output_type,
    )
    if output_type == "json":
        return web.Response(
            body=render_json(result), content_type="application/json"
        )
    return web.Response(text=render_text(result), content_type="text/plain")


def create_app(settings: Settings, resolver: Resolver) -> web.Application:
    """Build the aiohttp application.

    Args:
        settings: Runtime settings used for path parsing
        resolver: Shared resolver (and with it, the shared cache)

    Returns:
        Configured application

    """
    app = web.Application()
    app[SETTINGS_KEY] = settings
    app[RESOLVER_KEY] = resolver
    app.router.add_get("/{tail:.*}", handle_install)
    return app
