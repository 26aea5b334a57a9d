"""Tests for the repository search fallback."""

import re

import aiohttp
import pytest
from aioresponses import aioresponses

from gh_installer.core.search import (
    DEFAULT_BACKENDS,
    RepositorySearcher,
    parse_github_location,
)
from gh_installer.exceptions import SearchFallbackError

DUCKDUCKGO = re.compile(r"^https://html\.duckduckgo\.com/html.*$")
GOOGLE = re.compile(r"^https://www\.google\.com/search.*$")


class TestParseGithubLocation:
    """Test extraction of owner/repo from redirect targets."""

    @pytest.mark.parametrize(
        ("location", "expected"),
        [
            ("https://github.com/BurntSushi/ripgrep", ("BurntSushi", "ripgrep")),
            ("https://github.com/cli/cli/releases", ("cli", "cli")),
            ("https://github.com/go-task/task.git", ("go-task", "task")),
            ("https://github.com/owner/repo.js", ("owner", "repo.js")),
        ],
    )
    def test_repository_urls(self, location, expected):
        """Test that repository URLs are recognized."""
        assert parse_github_location(location) == expected

    @pytest.mark.parametrize(
        "location",
        [
            "",
            "https://github.com/",
            "https://gitlab.com/owner/repo",
            "http://github.com/owner/repo",
            "https://duckduckgo.com/?q=tool",
        ],
    )
    def test_non_repository_urls(self, location):
        """Test that other redirects are rejected."""
        assert parse_github_location(location) is None


@pytest.mark.asyncio
class TestRepositorySearcher:
    """Test searching across backends."""

    async def test_first_backend_redirect_wins(self):
        """Test that a DuckDuckGo redirect is used directly."""
        with aioresponses() as mocked:
            mocked.get(
                DUCKDUCKGO,
                status=302,
                headers={"Location": "https://github.com/BurntSushi/ripgrep"},
            )
            async with aiohttp.ClientSession() as session:
                searcher = RepositorySearcher(session)
                found = await searcher.search("ripgrep")

        assert found == ("BurntSushi", "ripgrep")

    async def test_query_contains_site_restriction(self):
        """Test the search phrase and the browser-like headers."""
        with aioresponses() as mocked:
            mocked.get(
                DUCKDUCKGO,
                status=302,
                headers={"Location": "https://github.com/junegunn/fzf"},
            )
            async with aiohttp.ClientSession() as session:
                await RepositorySearcher(session).search("fzf")

            (call,) = next(iter(mocked.requests.values()))

        assert call.kwargs["params"]["q"] == "! fzf site:github.com"
        assert call.kwargs["allow_redirects"] is False
        assert "Mozilla" in call.kwargs["headers"]["User-Agent"]

    async def test_falls_back_to_second_backend(self):
        """Test that a non-redirect answer moves on to Google."""
        with aioresponses() as mocked:
            mocked.get(DUCKDUCKGO, status=200, body="<html></html>")
            mocked.get(
                GOOGLE,
                status=302,
                headers={"Location": "https://github.com/sharkdp/fd"},
            )
            async with aiohttp.ClientSession() as session:
                found = await RepositorySearcher(session).search("fd")

        assert found == ("sharkdp", "fd")

    async def test_non_github_redirect_is_a_failure(self):
        """Test that redirects to other sites do not count."""
        with aioresponses() as mocked:
            mocked.get(
                DUCKDUCKGO,
                status=302,
                headers={"Location": "https://example.com/tool"},
            )
            mocked.get(
                GOOGLE,
                status=302,
                headers={"Location": "https://github.com/owner/tool"},
            )
            async with aiohttp.ClientSession() as session:
                found = await RepositorySearcher(session).search("tool")

        assert found == ("owner", "tool")

    async def test_transport_error_is_a_failure(self):
        """Test that connection errors move on to the next backend."""
        with aioresponses() as mocked:
            mocked.get(DUCKDUCKGO, exception=aiohttp.ClientConnectionError())
            mocked.get(
                GOOGLE,
                status=301,
                headers={"Location": "https://github.com/owner/tool"},
            )
            async with aiohttp.ClientSession() as session:
                found = await RepositorySearcher(session).search("tool")

        assert found == ("owner", "tool")

    async def test_all_backends_fail(self):
        """Test that SearchFallbackError is raised when nothing matches."""
        with aioresponses() as mocked:
            mocked.get(DUCKDUCKGO, status=200)
            mocked.get(GOOGLE, status=429)
            async with aiohttp.ClientSession() as session:
                searcher = RepositorySearcher(session)
                with pytest.raises(SearchFallbackError):
                    await searcher.search("nothing")

    async def test_custom_backend_order(self):
        """Test that only the configured backends are queried."""
        with aioresponses() as mocked:
            mocked.get(
                GOOGLE,
                status=302,
                headers={"Location": "https://github.com/owner/tool"},
            )
            async with aiohttp.ClientSession() as session:
                searcher = RepositorySearcher(
                    session, backends=(DEFAULT_BACKENDS[1],)
                )
                found = await searcher.search("tool")

        assert found == ("owner", "tool")
