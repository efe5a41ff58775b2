"""Signer slot endpoint handlers."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Final

from aiohttp import web

from signers_spec.subspecs.principal import InvalidAddressError, StandardPrincipal
from signers_spec.subspecs.signers import SignerSlots
from signers_spec.types import SSZOverflowError, Uint128

from .common import require_registry

logger = logging.getLogger(__name__)

SSZ_CONTENT_TYPE: Final = "application/octet-stream"
"""Media type of SSZ-encoded responses."""


def slots_to_json(slots: SignerSlots) -> list[dict[str, object]]:
    """Render slot assignments with signers as c32check addresses."""
    return [
        {"signer": entry.signer.to_address(), "num_slots": int(entry.num_slots)} for entry in slots
    ]


async def handle_slots(request: web.Request) -> web.Response:
    """
    Handle current slot assignments request.

    Response: JSON object with fields:
        - reward_cycle (integer): Cycle the assignments were last set for.
        - slots (array): Objects with `signer` (address) and `num_slots` (integer),
          in stored order.

    With `Accept: application/octet-stream`, the SSZ-encoded `SignerSlots`
    list is returned instead.

    Status Codes:
        200 OK: Assignments returned.
        503 Service Unavailable: Registry not initialized.
    """
    registry = require_registry(request)
    slots = registry.get_signer_slots().unwrap()

    if SSZ_CONTENT_TYPE in request.headers.get("Accept", ""):
        try:
            ssz_bytes = await asyncio.to_thread(slots.encode_bytes)
        except Exception as e:
            logger.error(f"Failed to encode signer slots: {e}")
            raise web.HTTPInternalServerError(reason="Encoding failed") from e
        return web.Response(body=ssz_bytes, content_type=SSZ_CONTENT_TYPE)

    return web.Response(
        body=json.dumps(
            {
                "reward_cycle": int(registry.last_set_cycle),
                "slots": slots_to_json(slots),
            }
        ),
        content_type="application/json",
    )


async def handle_slots_for(request: web.Request) -> web.Response:
    """
    Handle per-signer slot count request.

    Path: /signers/v0/slots/{signer}/{reward_cycle}

    Response: JSON object with fields:
        - num_slots (integer): Slots held by the signer in the cycle.

    Status Codes:
        200 OK: Count returned.
        400 Bad Request: Malformed signer address or reward cycle.
        503 Service Unavailable: Registry not initialized.
    """
    registry = require_registry(request)

    # Reasons go into the status line, so user input is echoed only in the body.
    try:
        signer = StandardPrincipal.from_address(request.match_info["signer"])
    except InvalidAddressError as e:
        raise web.HTTPBadRequest(reason="Invalid signer address", text=str(e)) from e

    raw_cycle = request.match_info["reward_cycle"]
    if not (raw_cycle.isascii() and raw_cycle.isdigit()):
        raise web.HTTPBadRequest(
            reason="Invalid reward cycle", text=f"Not a decimal number: {raw_cycle!r}"
        )
    try:
        reward_cycle = Uint128(int(raw_cycle))
    except (ValueError, SSZOverflowError) as e:
        raise web.HTTPBadRequest(reason="Invalid reward cycle", text=str(e)) from e

    num_slots = registry.get_signer_slots_for(signer, reward_cycle).unwrap()

    return web.Response(
        body=json.dumps({"num_slots": int(num_slots)}),
        content_type="application/json",
    )
