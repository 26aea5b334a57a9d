"""Tests for CLIRunner."""

from argparse import Namespace

import aiohttp
import pytest

from gh_installer import __version__
from gh_installer.cli import runner
from gh_installer.cli.commands import BaseCommandHandler
from gh_installer.config import Settings, SettingsManager
from gh_installer.constants import CONFIG_FILE_NAME
from gh_installer.core.resolver import Resolver
from gh_installer.exceptions import NoAssetsError


class RecordingHandler(BaseCommandHandler):
    calls: list[Namespace] = []

    async def execute(self, args: Namespace) -> None:
        RecordingHandler.calls.append(args)


class FailingHandler(BaseCommandHandler):
    async def execute(self, args: Namespace) -> None:
        raise NoAssetsError("no downloads found for this release", "o/r")


@pytest.fixture
def cli_runner(tmp_path):
    return runner.CLIRunner(SettingsManager(config_dir=tmp_path, environ={}))


@pytest.fixture(autouse=True)
def reset_calls():
    RecordingHandler.calls = []


@pytest.mark.asyncio
async def test_version(cli_runner, capsys):
    """Test that --version prints the package version."""
    await cli_runner.run(["--version"])

    assert capsys.readouterr().out.strip() == __version__


@pytest.mark.asyncio
async def test_no_command(cli_runner):
    """Test that a missing command exits with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        await cli_runner.run([])

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_dispatches_to_handler(cli_runner, monkeypatch):
    """Test that the parsed arguments reach the command handler."""
    monkeypatch.setitem(runner.COMMAND_HANDLERS, "resolve", RecordingHandler)

    await cli_runner.run(["resolve", "astral-sh/uv", "--json"])

    (args,) = RecordingHandler.calls
    assert args.target == "astral-sh/uv"
    assert args.json is True


@pytest.mark.asyncio
async def test_installer_error_exits(cli_runner, monkeypatch, capsys):
    """Test that resolution failures are reported and exit with 1."""
    monkeypatch.setitem(runner.COMMAND_HANDLERS, "resolve", FailingHandler)

    with pytest.raises(SystemExit) as exc_info:
        await cli_runner.run(["resolve", "o/r"])

    assert exc_info.value.code == 1
    assert "no downloads found" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_invalid_settings_exit(tmp_path, capsys):
    """Test that configuration errors stop the run before parsing."""
    (tmp_path / CONFIG_FILE_NAME).write_text(
        "[server]\nport = http\n", encoding="utf-8"
    )
    cli_runner = runner.CLIRunner(
        SettingsManager(config_dir=tmp_path, environ={})
    )

    with pytest.raises(SystemExit) as exc_info:
        await cli_runner.run(["serve"])

    assert exc_info.value.code == 1
    assert "port must be an integer" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_build_resolver_without_search():
    """Test that disabling search leaves the resolver without a searcher."""
    async with aiohttp.ClientSession() as session:
        resolver = runner.build_resolver(
            Settings(search_enabled=False, cache_ttl_seconds=0), session
        )

    assert isinstance(resolver, Resolver)
    assert resolver.searcher is None
    assert resolver.cache.enabled is False
