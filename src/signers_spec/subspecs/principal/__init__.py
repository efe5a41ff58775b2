"""Signer identities: standard principals and their c32check addresses."""

from .c32 import InvalidAddressError, c32_address, c32_address_decode
from .principal import AddressVersion, StandardPrincipal

__all__ = [
    "AddressVersion",
    "InvalidAddressError",
    "StandardPrincipal",
    "c32_address",
    "c32_address_decode",
]
