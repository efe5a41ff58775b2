"""
Client for downloading the slot assignments from another node.

Signer processes poll a node for the current assignment to find the slot
they own. The list is fetched as SSZ so it decodes into the same bounded
`SignerSlots` type the registry stores.
"""

from __future__ import annotations

import logging

import httpx

from signers_spec.subspecs.signers import SignerSlots

from .endpoints.signers import SSZ_CONTENT_TYPE

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
"""HTTP request timeout in seconds."""

SIGNER_SLOTS_ENDPOINT = "/signers/v0/slots"
"""API endpoint serving the current slot assignments."""


class RegistrySyncError(Exception):
    """
    Error while fetching the slot assignments.

    Raised when the request fails or the response does not decode.
    """


async def fetch_signer_slots(url: str) -> SignerSlots:
    """
    Fetch the current slot assignments from a node.

    Args:
        url: Base URL of the node API (e.g., "http://localhost:20443").

    Returns:
        The decoded slot assignments, in stored order.

    Raises:
        RegistrySyncError: If the request fails or the payload is invalid.
    """
    full_url = f"{url.rstrip('/')}{SIGNER_SLOTS_ENDPOINT}"

    logger.info(f"Fetching signer slots from {full_url}")

    headers = {"Accept": SSZ_CONTENT_TYPE}

    try:
        async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
            response = await client.get(full_url, headers=headers)
            response.raise_for_status()

            slots = SignerSlots.decode_bytes(response.content)
            logger.info(f"Fetched {len(slots)} signer slot entries")

            return slots

    except httpx.RequestError as exc:
        raise RegistrySyncError(
            f"Network error while connecting to {exc.request.url}: {exc}"
        ) from exc
    except httpx.HTTPStatusError as exc:
        raise RegistrySyncError(
            f"HTTP error {exc.response.status_code}: {exc.response.text[:200]}"
        ) from exc
    except Exception as e:
        raise RegistrySyncError(f"Failed to fetch signer slots: {e}") from e
