"""Tests for the c32 and c32check encodings."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from signers_spec.subspecs.principal.c32 import (
    InvalidAddressError,
    c32_address,
    c32_address_decode,
    c32_checksum,
    c32_decode,
    c32_encode,
    c32check_decode,
    c32check_encode,
)

SIGNER_HASH = bytes.fromhex("6d78de7b0625dfbfc16c3a8a5735f6dc3dc3f2ce")


class TestC32:
    """Tests for the raw c32 encoding."""

    def test_empty(self) -> None:
        """Empty input encodes to the empty string."""
        assert c32_encode(b"") == ""
        assert c32_decode("") == b""

    def test_leading_zero_bytes_are_kept(self) -> None:
        """Each leading zero byte becomes one '0' character."""
        assert c32_encode(b"\x00\x00\x01") == "001"
        assert c32_decode("001") == b"\x00\x00\x01"

    def test_known_value(self) -> None:
        """A single byte encodes as a base-32 number."""
        # 0xff == 255 == 7 * 32 + 31
        assert c32_encode(b"\xff") == "7Z"

    def test_ambiguous_characters_are_normalized(self) -> None:
        """O, I and L read as 0, 1 and 1; lowercase is accepted."""
        assert c32_decode("o") == c32_decode("0")
        assert c32_decode("1") == c32_decode("I") == c32_decode("l")
        assert c32_decode("7z") == b"\xff"

    def test_invalid_character(self) -> None:
        """U is not part of the alphabet."""
        with pytest.raises(InvalidAddressError):
            c32_decode("U")

    @given(st.binary(max_size=64))
    def test_decode_inverts_encode(self, data: bytes) -> None:
        """Any byte string survives a trip through c32."""
        assert c32_decode(c32_encode(data)) == data


class TestC32Check:
    """Tests for versioned, checksummed c32."""

    def test_checksum_is_four_bytes(self) -> None:
        """The checksum is a 4-byte double-SHA256 prefix."""
        assert len(c32_checksum(b"\x1a")) == 4

    def test_round_trip(self) -> None:
        """Version and payload are recovered."""
        assert c32check_decode(c32check_encode(26, SIGNER_HASH)) == (26, SIGNER_HASH)

    def test_version_must_fit_one_character(self) -> None:
        """Versions above 31 cannot be encoded."""
        with pytest.raises(InvalidAddressError):
            c32check_encode(32, SIGNER_HASH)

    def test_checksum_mismatch(self) -> None:
        """Altering a character breaks the checksum."""
        encoded = c32check_encode(26, SIGNER_HASH)
        tampered = encoded[:-1] + ("0" if encoded[-1] != "0" else "1")
        with pytest.raises(InvalidAddressError):
            c32check_decode(tampered)

    def test_too_short(self) -> None:
        """Values without room for a checksum are rejected."""
        with pytest.raises(InvalidAddressError):
            c32check_decode("P")
        with pytest.raises(InvalidAddressError):
            c32check_decode("P1")


class TestAddresses:
    """Tests for account addresses."""

    @pytest.mark.parametrize(
        "version, hash_bytes, address",
        [
            (22, b"\x00" * 20, "SP000000000000000000002Q6VF78"),
            (26, b"\x00" * 20, "ST000000000000000000002AMW42H"),
            (26, SIGNER_HASH, "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"),
        ],
    )
    def test_known_addresses(self, version: int, hash_bytes: bytes, address: str) -> None:
        """Known addresses encode and decode exactly."""
        assert c32_address(version, hash_bytes) == address
        assert c32_address_decode(address) == (version, hash_bytes)

    def test_lowercase_address_decodes(self) -> None:
        """Addresses are case-insensitive."""
        assert c32_address_decode("st000000000000000000002amw42h") == (26, b"\x00" * 20)

    def test_missing_prefix(self) -> None:
        """Addresses must start with S."""
        with pytest.raises(InvalidAddressError):
            c32_address_decode("T000000000000000000002AMW42H")

    def test_invalid_address_is_value_error(self) -> None:
        """Callers catching ValueError also catch malformed addresses."""
        with pytest.raises(ValueError):
            c32_address_decode("not-an-address")
