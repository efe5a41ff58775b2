"""Tests for fetching slot assignments from a node."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest

from signers_spec.subspecs.api import (
    ApiServer,
    ApiServerConfig,
    RegistrySyncError,
    fetch_signer_slots,
)
from signers_spec.subspecs.signers import SignerSlots, SlotRegistry


def test_fetches_slots_from_running_server(
    registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
) -> None:
    """The client decodes the list served by another node."""
    slots = slots_factory(1, 2, 3)
    registry.set_signer_slots(slots, 5)

    async def run_test() -> SignerSlots:
        server = ApiServer(
            config=ApiServerConfig(host="127.0.0.1", port=20571),
            registry_getter=lambda: registry,
        )
        await server.start()
        try:
            return await fetch_signer_slots("http://127.0.0.1:20571/")
        finally:
            server.stop()
            await asyncio.sleep(0.1)

    assert asyncio.run(run_test()) == slots


def test_unavailable_registry_raises() -> None:
    """A 503 from the node becomes a RegistrySyncError."""

    async def run_test() -> None:
        server = ApiServer(config=ApiServerConfig(host="127.0.0.1", port=20572))
        await server.start()
        try:
            await fetch_signer_slots("http://127.0.0.1:20572")
        finally:
            server.stop()
            await asyncio.sleep(0.1)

    with pytest.raises(RegistrySyncError, match="HTTP error 503"):
        asyncio.run(run_test())


def test_unreachable_node_raises() -> None:
    """Connection failures become a RegistrySyncError."""
    with pytest.raises(RegistrySyncError, match="Network error"):
        asyncio.run(fetch_signer_slots("http://127.0.0.1:20573"))
