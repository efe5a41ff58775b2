"""Test helpers for building principals and slot lists."""

from .builders import (
    BOOT_TESTNET_ADDRESS,
    SIGNER_ADDRESS,
    make_principal,
    make_slots,
)

__all__ = [
    "BOOT_TESTNET_ADDRESS",
    "SIGNER_ADDRESS",
    "make_principal",
    "make_slots",
]
