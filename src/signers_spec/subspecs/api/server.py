"""
Read-only API server for the signer slot registry.

Provides HTTP endpoints for:
- /signers/v0/health - Health check endpoint
- /signers/v0/slots - Current slot assignments (JSON or SSZ)
- /signers/v0/slots/{signer}/{reward_cycle} - Slots held by one signer
- /signers/v0/stackerdb/config - The signers StackerDB configuration
- /metrics - Prometheus metrics endpoint

Writes are not exposed over HTTP.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from aiohttp import web

from signers_spec.subspecs.signers import SlotRegistry

from .endpoints.common import REGISTRY_GETTER, RegistryGetter
from .routes import ROUTES

logger = logging.getLogger(__name__)


def _no_registry() -> SlotRegistry | None:
    """Default registry getter that returns None."""
    return None


@dataclass(frozen=True, slots=True)
class ApiServerConfig:
    """Configuration for the API server."""

    host: str = "0.0.0.0"
    """Host address to bind to."""

    port: int = 20443
    """Port to listen on."""

    enabled: bool = True
    """Whether the API server is enabled."""


@dataclass(slots=True)
class ApiServer:
    """
    HTTP API server exposing the registry's read operations.

    Uses aiohttp to handle HTTP protocol details efficiently.
    """

    config: ApiServerConfig
    """Server configuration."""

    registry_getter: RegistryGetter = _no_registry
    """Callable that returns the registry being served."""

    _runner: web.AppRunner | None = field(default=None, init=False)
    """The aiohttp application runner."""

    _site: web.TCPSite | None = field(default=None, init=False)
    """The TCP site for the server."""

    @property
    def registry(self) -> SlotRegistry | None:
        """Get the current registry."""
        return self.registry_getter()

    def create_app(self) -> web.Application:
        """Build the aiohttp application with every route registered."""
        app = web.Application()
        app[REGISTRY_GETTER] = self.registry_getter
        app.add_routes([web.get(path, handler) for path, handler in ROUTES.items()])
        return app

    async def start(self) -> None:
        """Start the API server in the background."""
        if not self.config.enabled:
            logger.info("API server is disabled")
            return

        self._runner = web.AppRunner(self.create_app())
        await self._runner.setup()

        self._site = web.TCPSite(self._runner, self.config.host, self.config.port)
        await self._site.start()

        logger.info(f"API server listening on {self.config.host}:{self.config.port}")

    async def run(self) -> None:
        """
        Run the API server until shutdown.

        This method blocks until stop() is called.
        """
        await self.start()

        while self._runner is not None:
            await asyncio.sleep(1)

    def stop(self) -> None:
        """Request graceful shutdown."""
        if self._runner is not None:
            asyncio.create_task(self._async_stop())

    async def _async_stop(self) -> None:
        """Gracefully stop the server."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._site = None
            logger.info("API server stopped")
