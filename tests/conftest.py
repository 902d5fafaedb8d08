"""Shared fixtures for the style guide scraper tests."""

import asyncio
import threading
import time
from collections.abc import Generator

import pytest
from aiohttp import web

from tests.mock_server import (
    COLOR_PAGE_HTML,
    SCALE_PAGE_HTML,
    create_app,
)
from tests.utils import find_free_port, make_page
from webstyles.common.lxml_page_element import LxmlPageElement


@pytest.fixture
def color_page() -> LxmlPageElement:
    """The mock color page, parsed."""
    return make_page(COLOR_PAGE_HTML)


@pytest.fixture
def scale_page() -> LxmlPageElement:
    """The mock scale increments page, parsed."""
    return make_page(SCALE_PAGE_HTML)


# =============================================================================
# aiohttp test server fixtures
# =============================================================================


class AioHttpTestServer:
    """Wrapper to run aiohttp server in a background thread."""

    def __init__(self, app: web.Application, port: int) -> None:
        self.app = app
        self.port = port
        self.host = "127.0.0.1"
        self._loop: asyncio.AbstractEventLoop | None = None
        self._runner: web.AppRunner | None = None
        self._thread: threading.Thread | None = None
        self._started = threading.Event()

    @property
    def url(self) -> str:
        """Get the base URL of the server."""
        return f"http://{self.host}:{self.port}"

    def start(self) -> None:
        """Start the server in a background thread."""
        self._thread = threading.Thread(target=self._run_server, daemon=True)
        self._thread.start()
        self._started.wait(timeout=5.0)

    def _run_server(self) -> None:
        """Run the server in an asyncio event loop."""
        self._loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self._loop)

        async def start() -> None:
            self._runner = web.AppRunner(self.app)
            await self._runner.setup()
            site = web.TCPSite(self._runner, self.host, self.port)
            await site.start()

        self._loop.run_until_complete(start())
        self._started.set()
        self._loop.run_forever()

    def stop(self) -> None:
        """Stop the server and clean up resources."""
        if self._loop and self._runner:
            runner = self._runner
            future = asyncio.run_coroutine_threadsafe(
                runner.cleanup(), self._loop
            )
            future.result(timeout=2.0)

        if self._loop:
            self._loop.call_soon_threadsafe(self._loop.stop)

        if self._thread:
            self._thread.join(timeout=2.0)
            # Give the OS a moment to release the port
            time.sleep(0.01)


@pytest.fixture
def style_guide_server() -> Generator[AioHttpTestServer, None, None]:
    """Start an aiohttp server serving the mock style guide pages.

    Yields:
        AioHttpTestServer instance with the mock style guide running.
    """
    server = AioHttpTestServer(create_app(), find_free_port())
    server.start()
    yield server
    server.stop()


@pytest.fixture
def server_url(style_guide_server: AioHttpTestServer) -> str:
    """Get the base URL of the test server.

    Returns:
        The base URL string (e.g., "http://127.0.0.1:8080").
    """
    return style_guide_server.url
