"""Query model and request path parsing.

A request path has the shape ``/[owner/]program[@release][!]``::

    /jpillora/serve@1.9.2   owner=jpillora program=serve release=1.9.2
    /micro                  owner=zyedidia program=micro (override table)
    /croc!                  owner=<default user> program=croc, move to PATH
"""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import orjson

from gh_installer.constants import DEFAULT_OWNER_OVERRIDES, LATEST_RELEASE
from gh_installer.exceptions import InvalidQueryError
from gh_installer.logger import get_logger

if TYPE_CHECKING:
    from gh_installer.config import Settings

logger = get_logger(__name__)

_TRUTHY_PARAMS = ("1", "true")


@dataclass(slots=True, frozen=True)
class Query:
    """Normalized input to a resolution.

    Attributes:
        owner: Repository owner
        program: Repository (program) name
        release: Release tag or ``latest``
        select: Case-sensitive substring filter on asset names
        as_program: Name the installed binary should get (rendering only)
        search: Whether the web search fallback may be used
        insecure: Whether the downloader may skip TLS verification
        move_to_path: Whether the installer moves the binary onto PATH

    """

    owner: str
    program: str
    release: str = LATEST_RELEASE
    select: str = ""
    as_program: str = ""
    search: bool = False
    insecure: bool = False
    move_to_path: bool = False

    @property
    def slug(self) -> str:
        """``owner/program`` repository slug."""
        return f"{self.owner}/{self.program}"

    def cache_key(self) -> str:
        """Stable key over the fields that affect resolution.

        Rendering-only and transport-only fields are excluded, so queries
        differing only in those share a cache entry.
        """
        payload = orjson.dumps(
            {
                "owner": self.owner,
                "program": self.program,
                "release": self.release,
                "select": self.select,
            },
            option=orjson.OPT_SORT_KEYS,
        )
        digest = hashlib.sha256(payload).digest()
        return base64.urlsafe_b64encode(digest).decode("ascii")

    def with_repository(self, owner: str, program: str) -> Query:
        """Copy pointing at another repository, with search consumed."""
        return replace(self, owner=owner, program=program, search=False)

    def without_search(self) -> Query:
        return replace(self, search=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "owner": self.owner,
            "program": self.program,
            "release": self.release,
            "select": self.select,
            "as": self.as_program,
            "search": self.search,
            "insecure": self.insecure,
            "move_to_path": self.move_to_path,
        }


def parse_request_path(
    path: str,
    params: Mapping[str, str],
    settings: Settings,
) -> Query:
    """Build a Query from a request path and its query parameters.

    Args:
        path: Request path, e.g. ``/owner/program@release!``
        params: Query string parameters (``select``, ``as``, ``insecure``,
            ``move``)
        settings: Runtime settings providing the default and forced owner

    Returns:
        Parsed Query

    Raises:
        InvalidQueryError: If no program name can be parsed

    """
    spec = path.strip().strip("/")

    move_to_path = spec.endswith("!")
    spec = spec.rstrip("!")
    if params.get("move", "") in _TRUTHY_PARAMS:
        move_to_path = True

    release = ""
    if "@" in spec:
        spec, release = spec.split("@", 1)

    owner = ""
    if "/" in spec:
        owner, program = spec.split("/", 1)
    else:
        program = spec

    if "/" in program or not program:
        msg = f"cannot parse program from {path!r}"
        raise InvalidQueryError(msg)

    search = False
    if not owner:
        override = DEFAULT_OWNER_OVERRIDES.get(program)
        if override:
            owner = override
        else:
            owner = settings.default_user
            search = True

    if settings.force_user:
        owner = settings.force_user
    if settings.force_repo:
        program = settings.force_repo

    query = Query(
        owner=owner,
        program=program,
        release=release or LATEST_RELEASE,
        select=params.get("select", ""),
        as_program=params.get("as", ""),
        search=search,
        insecure=params.get("insecure", "") in _TRUTHY_PARAMS,
        move_to_path=move_to_path,
    )
    logger.debug("Parsed %r into %s@%s", path, query.slug, query.release)
    return query
