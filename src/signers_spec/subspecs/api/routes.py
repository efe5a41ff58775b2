"""API route definitions."""

from collections.abc import Awaitable, Callable

from aiohttp import web

from .endpoints import health, metrics, signers, stackerdb

ROUTES: dict[str, Callable[[web.Request], Awaitable[web.Response]]] = {
    "/signers/v0/health": health.handle,
    "/signers/v0/slots": signers.handle_slots,
    "/signers/v0/slots/{signer}/{reward_cycle}": signers.handle_slots_for,
    "/signers/v0/stackerdb/config": stackerdb.handle_config,
    "/metrics": metrics.handle,
}
"""All API routes mapped to their handlers. Every route is a GET."""
