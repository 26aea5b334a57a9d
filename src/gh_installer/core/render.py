"""Result renderers and error sanitising.

Rendered errors may end up inside shell or Ruby string literals, so every
character outside a small safe set is stripped from them.
"""

import re

import orjson

from gh_installer.core.github.models import ResolveResult

_UNSAFE_ERROR_CHARS = re.compile(r"[^A-Za-z0-9 :/.]")


def sanitize_error(message: str) -> str:
    """Strip characters that could break out of a quoted string."""
    return _UNSAFE_ERROR_CHARS.sub("", message)


def render_json(result: ResolveResult) -> bytes:
    """Render a result as indented JSON."""
    return orjson.dumps(result.to_dict(), option=orjson.OPT_INDENT_2)


def render_text(result: ResolveResult) -> str:
    """Render a human-readable summary of a result.

    Example::

        repository: https://github.com/astral-sh/uv
        user: astral-sh
        program: uv
        release: 0.8.17
        release assets:
          [#01 darwin/amd64] https://.../uv-x86_64-apple-darwin.tar.gz
        move-into-path: false
    """
    query = result.query
    lines = [
        f"repository: https://github.com/{query.owner}/{query.program}",
        f"user: {query.owner}",
        f"program: {query.program}",
    ]
    if query.as_program:
        lines.append(f"as: {query.as_program}")
    lines.append(f"release: {result.resolved_release}")
    lines.append("release assets:")
    for index, asset in enumerate(result.assets, start=1):
        lines.append(f"  [#{index:02d} {asset.key}] {asset.url}")
        if asset.sha256:
            lines.append(f"    sha256: {asset.sha256}")
    lines.append(f"move-into-path: {str(query.move_to_path).lower()}")
    return "\n".join(lines) + "\n"
