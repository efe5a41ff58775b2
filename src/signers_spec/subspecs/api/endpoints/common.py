"""Helpers shared by the endpoint handlers."""

from __future__ import annotations

from collections.abc import Callable

from aiohttp import web

from signers_spec.subspecs.signers import SlotRegistry

RegistryGetter = Callable[[], SlotRegistry | None]
"""Callable returning the registry being served, if one is attached yet."""

REGISTRY_GETTER: web.AppKey[RegistryGetter] = web.AppKey("registry_getter", RegistryGetter)
"""Application key under which the server stores its registry getter."""


def require_registry(request: web.Request) -> SlotRegistry:
    """
    Return the registry attached to the application.

    Raises:
        HTTPServiceUnavailable: If no registry is attached.
    """
    registry_getter = request.app.get(REGISTRY_GETTER)
    registry = registry_getter() if registry_getter else None

    if registry is None:
        raise web.HTTPServiceUnavailable(reason="Registry not initialized")

    return registry
