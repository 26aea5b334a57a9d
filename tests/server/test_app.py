"""Tests for the HTTP front end."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import orjson
import pytest
import pytest_asyncio
from aiohttp import test_utils

from gh_installer.config import Settings
from gh_installer.core.github.models import Asset, ResolveResult
from gh_installer.exceptions import NoAssetsError, NotFoundError
from gh_installer.server import create_app


def make_result(query) -> ResolveResult:
    return ResolveResult(
        query=query,
        resolved_release="v1.9.2",
        timestamp=datetime(2025, 1, 1, tzinfo=UTC),
        assets=(
            Asset(
                name="serve_1.9.2_linux_amd64.gz",
                os="linux",
                arch="amd64",
                url="https://example.com/serve_1.9.2_linux_amd64.gz",
                type=".gz",
            ),
        ),
    )


@pytest.fixture
def resolver():
    mock = AsyncMock()
    mock.resolve.side_effect = make_result
    return mock


@pytest_asyncio.fixture
async def client(resolver):
    app = create_app(Settings(default_user="jpillora"), resolver)
    server = test_utils.TestServer(app)
    async with test_utils.TestClient(server) as test_client:
        yield test_client


@pytest.mark.asyncio
class TestInstallHandler:
    """Test suite for the request handler."""

    @pytest.mark.parametrize("path", ["/healthz", "/favicon.ico"])
    async def test_health(self, client, resolver, path):
        """Test health endpoints."""
        response = await client.get(path)

        assert response.status == 200
        assert await response.text() == "OK"
        resolver.resolve.assert_not_awaited()

    async def test_text_is_default(self, client, resolver):
        """Test plaintext rendering."""
        response = await client.get("/jpillora/serve@v1.9.2")

        assert response.status == 200
        assert response.content_type == "text/plain"
        text = await response.text()
        assert "program: serve" in text
        assert "[#01 linux/amd64]" in text

        (query,) = resolver.resolve.await_args.args
        assert query.owner == "jpillora"
        assert query.release == "v1.9.2"

    async def test_json(self, client):
        """Test JSON rendering."""
        response = await client.get("/jpillora/serve?type=json")

        assert response.status == 200
        assert response.content_type == "application/json"
        data = orjson.loads(await response.read())
        assert data["resolved_release"] == "v1.9.2"
        assert data["assets"][0]["key"] == "linux/amd64"

    async def test_query_params_reach_resolver(self, client, resolver):
        """Test that select and the bang suffix are parsed."""
        await client.get("/serve!?select=linux")

        (query,) = resolver.resolve.await_args.args
        assert query.select == "linux"
        assert query.move_to_path is True
        assert query.search is True

    async def test_unknown_type(self, client, resolver):
        """Test that unsupported output types are rejected."""
        response = await client.get("/jpillora/serve?type=yaml")

        assert response.status == 400
        assert await response.text() == "Unknown type"
        resolver.resolve.assert_not_awaited()

    async def test_invalid_path(self, client):
        """Test that paths without a program are rejected."""
        response = await client.get("/jpillora/@v1")

        assert response.status == 400
        assert await response.text() == "Invalid path"

    async def test_root_redirects_to_project_page(self, client, resolver):
        """Test that the bare root path points visitors at the project."""
        response = await client.get("/", allow_redirects=False)

        assert response.status == 301
        assert response.headers["Location"] == (
            "https://github.com/jpillora/installer"
        )
        resolver.resolve.assert_not_awaited()

    async def test_resolution_error_is_bad_gateway(self, client, resolver):
        """Test that resolution failures map to 502 with a safe body."""
        resolver.resolve.side_effect = NotFoundError(
            "https://api.github.com/repos/jpillora/nope/releases/latest"
        )

        response = await client.get("/jpillora/nope")

        assert response.status == 502
        assert await response.text() == (
            "not found: url "
            "https://api.github.com/repos/jpillora/nope/releases/latest"
        )

    async def test_error_body_is_sanitized(self, client, resolver):
        """Test that quotes never reach the response body."""
        resolver.resolve.side_effect = NoAssetsError(
            "no downloads found for this release", "o/it's"
        )

        response = await client.get("/o/tool")

        assert response.status == 502
        body = await response.text()
        assert "'" not in body
        assert body == (
            "No downloads available for o/its: "
            "no downloads found for this release"
        )

    async def test_search_disabled_by_settings(self, resolver):
        """Test that search_enabled=false turns off the fallback."""
        app = create_app(Settings(search_enabled=False), resolver)
        server = test_utils.TestServer(app)
        async with test_utils.TestClient(server) as test_client:
            await test_client.get("/serve")

        (query,) = resolver.resolve.await_args.args
        assert query.search is False
