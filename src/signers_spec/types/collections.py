"""Bounded list type."""

from __future__ import annotations

import io
from typing import (
    IO,
    Any,
    ClassVar,
    Generic,
    Iterator,
    Sequence,
    Type,
    TypeVar,
    cast,
    overload,
)

from pydantic import Field, field_serializer, field_validator
from typing_extensions import Self

from .byte_arrays import BaseBytes
from .constants import OFFSET_BYTE_LENGTH
from .exceptions import SSZDecodeError, SSZLengthError, SSZTypeError
from .ssz_base import SSZModel, SSZType
from .uint import Uint32

T = TypeVar("T", bound=SSZType)
"""
Generic type parameter for list elements.

Used with `Generic[T]` so that type checkers infer `SignerSlots[0]` as a
`SignerSlot` rather than `Any`.
"""


class SSZList(SSZModel, Generic[T]):
    """
    Variable-length SSZ sequence with a maximum capacity.

    An SSZ List holds between 0 and `LIMIT` elements of type `ELEMENT_TYPE`,
    in insertion order. The bound is checked on every construction, so an
    over-long list can never exist: callers that want to add elements must
    build a new list, and that build fails instead of truncating.

    Subclasses must define:
        ELEMENT_TYPE: The SSZ type of each element
        LIMIT: The maximum number of elements allowed

    Example:
        class ReplicaAddress(SSZList[Uint128]):
            ELEMENT_TYPE = Uint128
            LIMIT = 16

        addr = ReplicaAddress(data=[Uint128(127), Uint128(0), Uint128(0), Uint128(1)])
        assert len(addr) == 4

    SSZ Encoding:
        - Fixed-size elements: Serialized back-to-back
        - Variable-size elements: Offset table followed by element data
    """

    ELEMENT_TYPE: ClassVar[Type[SSZType]]
    """The SSZ type of elements in this list."""

    LIMIT: ClassVar[int]
    """The maximum number of elements allowed."""

    data: Sequence[T] = Field(default_factory=tuple)
    """
    The immutable sequence of elements.

    Accepts lists or tuples on input; stored as a tuple after validation.
    """

    @field_serializer("data", when_used="json")
    def _serialize_data(self, value: Sequence[T]) -> list[Any]:
        """Serialize list elements to JSON, rendering byte strings as 0x-hex."""
        return ["0x" + item.hex() if isinstance(item, BaseBytes) else item for item in value]

    @field_validator("data", mode="before")
    @classmethod
    def _validate_list_data(cls, v: Any) -> tuple[SSZType, ...]:
        """Validate and convert input to a tuple of SSZType elements."""
        if not hasattr(cls, "ELEMENT_TYPE") or not hasattr(cls, "LIMIT"):
            raise SSZTypeError(f"{cls.__name__} must define ELEMENT_TYPE and LIMIT")

        if isinstance(v, (list, tuple)):
            elements = v
        elif hasattr(v, "__iter__") and not isinstance(v, (str, bytes)):
            elements = list(v)
        else:
            raise SSZTypeError(f"Expected iterable, got {type(v).__name__}")

        # The bound is checked before any element is converted.
        if len(elements) > cls.LIMIT:
            raise SSZLengthError(
                cls.__name__, expected=cls.LIMIT, actual=len(elements), is_limit=True
            )

        typed_values = []
        for element in elements:
            if isinstance(element, cls.ELEMENT_TYPE):
                typed_values.append(element)
            else:
                try:
                    typed_values.append(cast(Any, cls.ELEMENT_TYPE)(element))
                except Exception as e:
                    raise SSZTypeError(
                        f"Expected {cls.ELEMENT_TYPE.__name__}, got {type(element).__name__}"
                    ) from e

        return tuple(typed_values)

    @classmethod
    def is_fixed_size(cls) -> bool:
        """An SSZList is never fixed-size (length varies from 0 to LIMIT)."""
        return False

    @classmethod
    def get_byte_length(cls) -> int:
        """Lists are variable-size, so this raises an SSZTypeError."""
        raise SSZTypeError(f"{cls.__name__}: variable-size list has no fixed byte length")

    def serialize(self, stream: IO[bytes]) -> int:
        """Serialize the list to a binary stream."""
        if self.ELEMENT_TYPE.is_fixed_size():
            return sum(element.serialize(stream) for element in self.data)

        # Variable-size elements: an offset per element, then the element bodies.
        body = io.BytesIO()
        offset = len(self.data) * OFFSET_BYTE_LENGTH
        for element in self.data:
            Uint32(offset).serialize(stream)
            offset += element.serialize(body)
        stream.write(body.getvalue())
        return offset

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """Deserialize a list from a binary stream."""
        if cls.ELEMENT_TYPE.is_fixed_size():
            element_size = cls.ELEMENT_TYPE.get_byte_length()
            if scope % element_size != 0:
                raise SSZDecodeError(
                    cls.__name__, f"scope {scope} not divisible by element size {element_size}"
                )

            count = scope // element_size
            if count > cls.LIMIT:
                raise SSZLengthError(cls.__name__, expected=cls.LIMIT, actual=count, is_limit=True)

            return cls(
                data=[cls.ELEMENT_TYPE.deserialize(stream, element_size) for _ in range(count)]
            )

        if scope == 0:
            return cls(data=[])
        if scope < OFFSET_BYTE_LENGTH:
            raise SSZDecodeError(cls.__name__, f"scope {scope} too small for variable-size list")

        # The first offset marks the end of the offset table, which gives the count.
        first_offset = int(Uint32.deserialize(stream, OFFSET_BYTE_LENGTH))
        if first_offset > scope or first_offset % OFFSET_BYTE_LENGTH != 0:
            raise SSZDecodeError(cls.__name__, f"invalid offset {first_offset}")

        count = first_offset // OFFSET_BYTE_LENGTH
        if count > cls.LIMIT:
            raise SSZLengthError(cls.__name__, expected=cls.LIMIT, actual=count, is_limit=True)

        offsets = [first_offset] + [
            int(Uint32.deserialize(stream, OFFSET_BYTE_LENGTH)) for _ in range(count - 1)
        ]
        offsets.append(scope)

        elements = []
        for start, end in zip(offsets, offsets[1:]):
            if start > end:
                raise SSZDecodeError(cls.__name__, f"invalid offsets start={start} > end={end}")
            elements.append(cls.ELEMENT_TYPE.deserialize(stream, end - start))

        return cls(data=elements)

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        """Iterate over list elements."""
        return iter(self.data)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        """Access element(s) by index or slice."""
        return self.data[index]
