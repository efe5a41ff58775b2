"""Standard principal container: the identity of a signer."""

from __future__ import annotations

from enum import IntEnum

from signers_spec.types import Bytes20, Container, Uint8

from .c32 import InvalidAddressError, c32_address, c32_address_decode


class AddressVersion(IntEnum):
    """Address version bytes for each network and key scheme."""

    MAINNET_SINGLESIG = 22
    """Mainnet, single public key (addresses start with `SP`)."""

    MAINNET_MULTISIG = 20
    """Mainnet, multi-signature (addresses start with `SM`)."""

    TESTNET_SINGLESIG = 26
    """Testnet, single public key (addresses start with `ST`)."""

    TESTNET_MULTISIG = 21
    """Testnet, multi-signature (addresses start with `SN`)."""


MAINNET_VERSIONS = frozenset({AddressVersion.MAINNET_SINGLESIG, AddressVersion.MAINNET_MULTISIG})
"""Versions that belong to mainnet."""


class StandardPrincipal(Container):
    """
    An account principal: an address version plus the hash160 of the key.

    Equality, hashing and encoding are by value, so two principals parsed
    from the same address compare equal.
    """

    version: Uint8
    """Address version byte (see `AddressVersion`)."""

    hash_bytes: Bytes20
    """hash160 of the account's public key (or redeem script)."""

    @classmethod
    def from_address(cls, address: str) -> StandardPrincipal:
        """
        Parse a c32check address such as `SP000000000000000000002Q6VF78`.

        Raises:
            InvalidAddressError: If the address is malformed, has a bad
                checksum, or does not carry a 20-byte hash.
        """
        version, data = c32_address_decode(address)
        if len(data) != Bytes20.LENGTH:
            raise InvalidAddressError(
                f"Address {address!r} carries {len(data)} hash bytes, expected {Bytes20.LENGTH}"
            )
        return cls(version=Uint8(version), hash_bytes=Bytes20(data))

    def to_address(self) -> str:
        """Render the principal as its c32check address."""
        return c32_address(int(self.version), bytes(self.hash_bytes))

    @property
    def is_mainnet(self) -> bool:
        """True if the version byte belongs to mainnet."""
        return int(self.version) in MAINNET_VERSIONS

    def __str__(self) -> str:
        return self.to_address()
