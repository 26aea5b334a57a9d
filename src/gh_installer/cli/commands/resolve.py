"""Resolve command handler."""

import sys
from argparse import Namespace

from gh_installer.cli.commands.base import BaseCommandHandler
from gh_installer.core.query import parse_request_path
from gh_installer.core.render import render_json, render_text
from gh_installer.logger import get_logger

logger = get_logger(__name__)


class ResolveHandler(BaseCommandHandler):
    """Resolves one ``[owner/]program[@release]`` and prints the result."""

    async def execute(self, args: Namespace) -> None:
        params = {"select": args.select} if args.select else {}
        query = parse_request_path(args.target, params, self.settings)
        if args.no_search or not self.settings.search_enabled:
            query = query.without_search()

        logger.debug("Resolving %s@%s", query.slug, query.release)
        result = await self.resolver.resolve(query)

        if args.json:
            sys.stdout.write(render_json(result).decode("utf-8") + "\n")
        else:
            sys.stdout.write(render_text(result))
