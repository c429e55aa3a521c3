"""Tests for the FastAPI app - loader dependency overridden with a mocked transport."""

import pytest
from bs4 import BeautifulSoup
from httpx import ASGITransport, AsyncClient

from gitcard import __version__
from gitcard.api import create_app, get_loader
from gitcard.core.loader import ProfileLoader
from tests.mocks import PROFILE_BODY, RATE_LIMIT_BODY, json_transport


def make_app(config, transport):
    app = create_app(config)

    async def override_loader():
        async with ProfileLoader(config, transport=transport) as loader:
            yield loader

    app.dependency_overrides[get_loader] = override_loader
    return app


def client_for(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


class TestProfilePage:
    """GET /github renders the layout around the profile state."""

    @pytest.mark.asyncio
    async def test_loaded_profile(self, config):
        app = make_app(config, json_transport(PROFILE_BODY))

        async with client_for(app) as client:
            response = await client.get("/github")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        soup = BeautifulSoup(response.text, "html.parser")
        main = soup.find("main")
        assert "Github: 42" in main.get_text()
        assert main.find("img")["src"] == "https://example.com/a.png"
        assert main.find("img")["width"] == "300"

    @pytest.mark.asyncio
    async def test_page_composition_order(self, config):
        app = make_app(config, json_transport(PROFILE_BODY))

        async with client_for(app) as client:
            response = await client.get("/github")

        html = response.text
        assert html.index("<header") < html.index("Github: 42") < html.index("<footer")

    @pytest.mark.asyncio
    async def test_failed_load_renders_error(self, config):
        app = make_app(config, json_transport(RATE_LIMIT_BODY, status_code=403))

        async with client_for(app) as client:
            response = await client.get("/github")

        assert response.status_code == 502
        soup = BeautifulSoup(response.text, "html.parser")
        assert soup.find(attrs={"role": "alert"}) is not None
        assert "rate_limited" in response.text
        assert soup.find("header") is not None
        assert soup.find("footer") is not None

    @pytest.mark.asyncio
    async def test_each_request_loads_again(self, config):
        transport = json_transport(PROFILE_BODY)
        app = make_app(config, transport)

        async with client_for(app) as client:
            await client.get("/github")
            await client.get("/github")

        assert len(transport.requests) == 2


class TestProfileJson:
    """GET /api/profile returns the tagged result."""

    @pytest.mark.asyncio
    async def test_loaded(self, config):
        app = make_app(config, json_transport(PROFILE_BODY))

        async with client_for(app) as client:
            response = await client.get("/api/profile")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "loaded"
        assert body["profile"]["followers"] == 42
        assert body["profile"]["avatar_url"] == "https://example.com/a.png"

    @pytest.mark.asyncio
    async def test_not_found(self, config):
        app = make_app(config, json_transport({"message": "Not Found"}, status_code=404))

        async with client_for(app) as client:
            response = await client.get("/api/profile")

        assert response.status_code == 502
        body = response.json()
        assert body["status"] == "failed"
        assert body["error"] == "not_found"
        assert body["status_code"] == 404


class TestSystemRoutes:
    """Home page, health and config."""

    @pytest.mark.asyncio
    async def test_home(self, config):
        app = make_app(config, json_transport(PROFILE_BODY))

        async with client_for(app) as client:
            response = await client.get("/")

        assert response.status_code == 200
        soup = BeautifulSoup(response.text, "html.parser")
        assert soup.find("a", attrs={"aria-current": "page"})["href"] == "/"
        assert "octocat" in soup.find("main").get_text()

    @pytest.mark.asyncio
    async def test_home_does_not_fetch(self, config):
        transport = json_transport(PROFILE_BODY)
        app = make_app(config, transport)

        async with client_for(app) as client:
            await client.get("/")

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_health(self, config):
        app = make_app(config, json_transport(PROFILE_BODY))

        async with client_for(app) as client:
            response = await client.get("/health")

        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__

    @pytest.mark.asyncio
    async def test_config(self, config):
        app = make_app(config, json_transport(PROFILE_BODY))

        async with client_for(app) as client:
            response = await client.get("/api/config")

        body = response.json()
        assert body["username"] == "octocat"
        assert body["avatar_width"] == 300
        assert body["log_format"] == "json"
