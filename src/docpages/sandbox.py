"""Local sandbox for integration testing.

Runs an application on a TCP port for the duration of a test and shuts it
down afterwards.
"""

import logging
import os
from collections.abc import Awaitable, Callable

from aiohttp import web

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3333


class Sandbox:
    """Serves an aiohttp application on a local port.

    start() returns the matching end() coroutine function, so callers can
    hold on to the shutdown handle the same way they would with a context
    manager:

        end = await sandbox.start()
        ...
        await end()
    """

    def __init__(
        self,
        app: web.Application,
        *,
        host: str = "127.0.0.1",
        port: int | None = None,
    ) -> None:
        """Initialize the sandbox.

        Args:
            app: Application to serve
            host: Interface to bind to
            port: Port to bind to. Defaults to $PORT, or 3333 if unset.
                  Use 0 to bind an ephemeral port.
        """
        self._app = app
        self._host = host
        self._port = port if port is not None else int(os.environ.get("PORT", DEFAULT_PORT))
        self._runner: web.AppRunner | None = None

    @property
    def started(self) -> bool:
        return self._runner is not None

    @property
    def port(self) -> int:
        """Bound port, resolved from the listening socket once started."""
        if self._runner is not None and self._runner.addresses:
            return self._runner.addresses[0][1]
        return self._port

    def url(self, path: str = "/") -> str:
        return f"http://{self._host}:{self.port}{path}"

    async def start(self) -> Callable[[], Awaitable[None]]:
        """Start serving the application.

        Returns:
            Coroutine function that stops the sandbox

        Raises:
            RuntimeError: If the sandbox is already running
        """
        if self._runner is not None:
            raise RuntimeError("Sandbox already started")

        runner = web.AppRunner(self._app)
        await runner.setup()
        site = web.TCPSite(runner, self._host, self._port)
        try:
            await site.start()
        except OSError:
            await runner.cleanup()
            raise

        self._runner = runner
        logger.info(f"Sandbox listening on {self.url()}")
        return self.end

    async def end(self) -> None:
        """Stop serving. Safe to call when the sandbox is not running."""
        if self._runner is None:
            return
        runner, self._runner = self._runner, None
        await runner.cleanup()
        logger.info("Sandbox stopped")

    async def __aenter__(self) -> "Sandbox":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.end()
