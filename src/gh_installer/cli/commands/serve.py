"""Serve command handler."""

import asyncio
from argparse import Namespace

from aiohttp import web

from gh_installer.cli.commands.base import BaseCommandHandler
from gh_installer.logger import get_logger
from gh_installer.server import create_app

logger = get_logger(__name__)


class ServeHandler(BaseCommandHandler):
    """Runs the HTTP server until the process is interrupted."""

    async def execute(self, args: Namespace) -> None:
        app = create_app(self.settings, self.resolver)
        runner = web.AppRunner(app)
        await runner.setup()
        try:
            site = web.TCPSite(runner, args.host, args.port)
            await site.start()
            logger.info("Listening on http://%s:%d", args.host, args.port)
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()
