"""Fixtures for integration tests against real browsers and databases."""

from collections.abc import AsyncGenerator, Generator

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer
from playwright.async_api import async_playwright
from pydantic import SecretStr
from testcontainers.core import testcontainers_config
from testcontainers.postgres import PostgresContainer

from resource_harness.models.config import HarnessConfig

EXAMPLE_PAGE = """<!doctype html>
<html>
<head><title>Example Domain</title></head>
<body><h1>Example Domain</h1></body>
</html>
"""


@pytest.fixture(scope="session", autouse=True)
def _disable_ryuk() -> None:
    """Disable the extra cleanup instance, we use contexts to clean containers."""
    testcontainers_config.ryuk_disabled = True


@pytest.fixture(scope="session")
def postgres() -> Generator[PostgresContainer]:
    """Start a PostgreSQL container, skipping when Docker is unavailable."""
    try:
        container = PostgresContainer("postgres:16-alpine", driver=None)
        container.start()
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"Docker is not available: {exc}")

    try:
        yield container
    finally:
        container.stop()


@pytest.fixture
def database_config(postgres: PostgresContainer) -> HarnessConfig:
    """Harness config pointing at the PostgreSQL container."""
    host = postgres.get_container_host_ip()
    port = postgres.get_exposed_port(5432)
    return HarnessConfig(
        timeout_ms=20000,
        resource_kind="database",
        connection_params={
            "user": postgres.username,
            "password": SecretStr(postgres.password),
            "connect_string": f"host={host} port={port} dbname={postgres.dbname}",
        },
    )


@pytest.fixture
async def browser_config() -> HarnessConfig:
    """Harness config for headless Chromium, skipping when it cannot launch."""
    try:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=True)
            await browser.close()
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"Chromium is not available: {exc}")

    return HarnessConfig(
        timeout_ms=30000,
        resource_kind="browser",
        connection_params={"browser": "chromium", "headless": True},
    )


@pytest.fixture
async def example_page_url() -> AsyncGenerator[str]:
    """Serve a page titled "Example Domain" from a local server."""

    async def index(request: web.Request) -> web.Response:
        return web.Response(text=EXAMPLE_PAGE, content_type="text/html")

    app = web.Application()
    app.router.add_get("/", index)
    server = TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/"))
    finally:
        await server.close()
