"""Builders for principals and slot lists used across tests."""

from __future__ import annotations

from signers_spec.subspecs.principal import AddressVersion, StandardPrincipal
from signers_spec.subspecs.signers import SignerSlot, SignerSlots
from signers_spec.types import Bytes20, Uint8, Uint128

BOOT_TESTNET_ADDRESS = "ST000000000000000000002AMW42H"
"""Testnet boot-code address (version 26, all-zero hash)."""

SIGNER_ADDRESS = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
"""A testnet signer address with hash 6d78de7b0625dfbfc16c3a8a5735f6dc3dc3f2ce."""


def make_principal(seed: int) -> StandardPrincipal:
    """Build a distinct testnet principal from `seed` (0 to 2**32 - 1)."""
    return StandardPrincipal(
        version=Uint8(AddressVersion.TESTNET_SINGLESIG),
        hash_bytes=Bytes20(b"\x01" * 16 + seed.to_bytes(4, "big")),
    )


def make_slots(*counts: int) -> SignerSlots:
    """Build a slot list giving the i-th synthetic signer `counts[i]` slots."""
    return SignerSlots(
        data=[
            SignerSlot(signer=make_principal(i), num_slots=Uint128(count))
            for i, count in enumerate(counts)
        ]
    )
