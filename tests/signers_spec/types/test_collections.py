"""Tests for the bounded SSZList type."""

import pytest

from signers_spec.types import Container, SSZDecodeError, SSZLengthError, SSZList, Uint32, Uint128


class SmallList(SSZList[Uint128]):
    """A list of at most four Uint128 values."""

    ELEMENT_TYPE = Uint128
    LIMIT = 4


class Pair(Container):
    """A fixed-size container used as a list element."""

    a: Uint32
    b: Uint32


class PairList(SSZList[Pair]):
    """A list of fixed-size containers."""

    ELEMENT_TYPE = Pair
    LIMIT = 3


class NestedList(SSZList[SmallList]):
    """A list of variable-size elements."""

    ELEMENT_TYPE = SmallList
    LIMIT = 2


def test_construction_preserves_order() -> None:
    """Elements keep their insertion order."""
    values = SmallList(data=[Uint128(3), Uint128(1), Uint128(2)])
    assert [int(v) for v in values] == [3, 1, 2]
    assert values[0] == Uint128(3)
    assert len(values) == 3


def test_plain_ints_are_converted() -> None:
    """Raw integers are converted to the element type."""
    values = SmallList(data=[1, 2])
    assert all(isinstance(v, Uint128) for v in values)


def test_limit_accepted() -> None:
    """A list exactly at the limit is valid."""
    assert len(SmallList(data=[Uint128(i) for i in range(4)])) == 4


def test_over_limit_rejected() -> None:
    """A list one past the limit cannot be built."""
    with pytest.raises(SSZLengthError):
        SmallList(data=[Uint128(i) for i in range(5)])


def test_empty_list_encodes_to_nothing() -> None:
    """An empty list has an empty encoding."""
    assert SmallList(data=[]).encode_bytes() == b""
    assert len(SmallList.decode_bytes(b"")) == 0


def test_fixed_size_elements_are_packed() -> None:
    """Fixed-size elements are written back to back."""
    encoded = PairList(data=[Pair(a=Uint32(1), b=Uint32(2))]).encode_bytes()
    assert encoded == b"\x01\x00\x00\x00\x02\x00\x00\x00"


def test_variable_size_elements_use_offsets() -> None:
    """Variable-size elements are preceded by an offset table."""
    value = NestedList(
        data=[SmallList(data=[Uint128(1)]), SmallList(data=[])],
    )
    encoded = value.encode_bytes()

    # Two offsets (8 bytes), then one 16-byte element, then an empty one.
    assert encoded[:4] == b"\x08\x00\x00\x00"
    assert encoded[4:8] == b"\x18\x00\x00\x00"
    assert len(encoded) == 8 + 16
    assert NestedList.decode_bytes(encoded) == value


def test_decode_rejects_misaligned_scope() -> None:
    """A fixed-size element list must decode from a multiple of its width."""
    with pytest.raises(SSZDecodeError):
        SmallList.decode_bytes(b"\x00" * 17)


def test_decode_rejects_too_many_elements() -> None:
    """Decoding more elements than the limit fails."""
    with pytest.raises(SSZLengthError):
        SmallList.decode_bytes(b"\x00" * 16 * 5)
