"""
Crockford-style base32 ("c32") and the c32check address encoding.

Account addresses are the letter "S", one c32 character for the version, and
the c32 encoding of `hash160 || checksum`. The checksum is the first four
bytes of `sha256(sha256(version || hash160))`.

Leading zero bytes are significant: each one is written as a single "0"
character, and the remaining bytes are written as a big-endian base32 number
without leading zero digits. Decoding reverses both parts.
"""

from __future__ import annotations

import hashlib
from typing import Final

C32_ALPHABET: Final = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
"""The 32 symbols of the encoding, in digit order."""

CHECKSUM_LENGTH: Final = 4
"""Number of checksum bytes appended before encoding."""

ADDRESS_PREFIX: Final = "S"
"""First character of every account address."""

# Characters that are commonly confused with digits are read as those digits.
_NORMALIZE: Final = str.maketrans({"O": "0", "L": "1", "I": "1"})


class InvalidAddressError(ValueError):
    """Raised when a string is not a well-formed c32 or c32check value."""


def c32_normalize(text: str) -> str:
    """Uppercase `text` and map ambiguous letters (O, L, I) to digits."""
    return text.upper().translate(_NORMALIZE)


def c32_encode(data: bytes) -> str:
    """Encode `data` as c32, preserving leading zero bytes."""
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    value = int.from_bytes(data, "big")

    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 32)
        digits.append(C32_ALPHABET[remainder])

    return "0" * leading_zeros + "".join(reversed(digits))


def c32_decode(text: str) -> bytes:
    """
    Decode a c32 string back to bytes.

    Raises:
        InvalidAddressError: If `text` contains a character outside the alphabet.
    """
    normalized = c32_normalize(text)
    leading_zeros = len(normalized) - len(normalized.lstrip("0"))

    value = 0
    for char in normalized:
        digit = C32_ALPHABET.find(char)
        if digit < 0:
            raise InvalidAddressError(f"Invalid c32 character {char!r} in {text!r}")
        value = value * 32 + digit

    body = value.to_bytes((value.bit_length() + 7) // 8, "big") if value else b""
    return b"\x00" * leading_zeros + body


def c32_checksum(payload: bytes) -> bytes:
    """Return the 4-byte double-SHA256 checksum of `payload`."""
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:CHECKSUM_LENGTH]


def c32check_encode(version: int, data: bytes) -> str:
    """Encode `data` under `version` with an appended checksum."""
    if not 0 <= version < len(C32_ALPHABET):
        raise InvalidAddressError(f"Version {version} does not fit in one c32 character")
    checksum = c32_checksum(bytes([version]) + data)
    return C32_ALPHABET[version] + c32_encode(data + checksum)


def c32check_decode(text: str) -> tuple[int, bytes]:
    """
    Decode a c32check string into its version and payload.

    Raises:
        InvalidAddressError: If the string is too short, malformed, or the
            checksum does not match.
    """
    normalized = c32_normalize(text)
    if len(normalized) < 2:
        raise InvalidAddressError(f"c32check value too short: {text!r}")

    version = C32_ALPHABET.find(normalized[0])
    if version < 0:
        raise InvalidAddressError(f"Invalid c32 version character in {text!r}")

    decoded = c32_decode(normalized[1:])
    if len(decoded) < CHECKSUM_LENGTH:
        raise InvalidAddressError(f"c32check value too short: {text!r}")

    data, checksum = decoded[:-CHECKSUM_LENGTH], decoded[-CHECKSUM_LENGTH:]
    if c32_checksum(bytes([version]) + data) != checksum:
        raise InvalidAddressError(f"Checksum mismatch in {text!r}")

    return version, data


def c32_address(version: int, hash_bytes: bytes) -> str:
    """Render an account address from its version and hash160."""
    return ADDRESS_PREFIX + c32check_encode(version, hash_bytes)


def c32_address_decode(address: str) -> tuple[int, bytes]:
    """
    Parse an account address into its version and hash160.

    Raises:
        InvalidAddressError: If the address does not start with "S" or fails
            c32check decoding.
    """
    if not address[:1].upper() == ADDRESS_PREFIX:
        raise InvalidAddressError(f"Address must start with {ADDRESS_PREFIX!r}: {address!r}")
    return c32check_decode(address[1:])
