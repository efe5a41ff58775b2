"""
SSZ Container Type: ordered heterogeneous collections with named fields.

Every registry record (a signer's slot assignment, the registry state, the
StackerDB configuration) is a container, which gives it pydantic validation
and a deterministic byte encoding in one place.
"""

from __future__ import annotations

import io
from typing import IO, Any, Type, cast

from typing_extensions import Self

from .base import StrictBaseModel
from .constants import OFFSET_BYTE_LENGTH
from .exceptions import SSZDecodeError, SSZTypeError
from .ssz_base import SSZType
from .uint import Uint32


class Container(StrictBaseModel, SSZType):
    """
    A strict, immutable, ordered collection of named SSZ fields.

    Fields are encoded in definition order. Fixed-size fields are written in
    place; each variable-size field leaves a 4-byte offset in the fixed part
    and its body is appended after all fixed parts.

    Example:
        >>> class SignerSlot(Container):
        ...     signer: StandardPrincipal
        ...     num_slots: Uint128

    Layout:
        [fixed_1][offset_2][fixed_3]...[variable_2]...
    """

    @classmethod
    def _field_types(cls) -> list[tuple[str, Type[SSZType]]]:
        """Return (name, SSZ type) pairs in definition order."""
        return [
            (name, cast(Type[SSZType], info.annotation)) for name, info in cls.model_fields.items()
        ]

    @classmethod
    def is_fixed_size(cls) -> bool:
        """A container is fixed-size only when all of its fields are."""
        return all(field_type.is_fixed_size() for _, field_type in cls._field_types())

    @classmethod
    def get_byte_length(cls) -> int:
        """
        Return the encoded length of a fixed-size container.

        Raises:
            SSZTypeError: If any field is variable-size.
        """
        if not cls.is_fixed_size():
            raise SSZTypeError(f"{cls.__name__} is variable-size")
        return sum(field_type.get_byte_length() for _, field_type in cls._field_types())

    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the container to a binary stream.

        Returns:
            Number of bytes written to the stream.
        """
        # None marks a variable-size field whose offset is filled in below.
        fixed_parts: list[bytes | None] = []
        variable_parts: list[bytes] = []

        for name, field_type in self._field_types():
            encoded = getattr(self, name).encode_bytes()
            if field_type.is_fixed_size():
                fixed_parts.append(encoded)
            else:
                fixed_parts.append(None)
                variable_parts.append(encoded)

        offset = sum(OFFSET_BYTE_LENGTH if part is None else len(part) for part in fixed_parts)

        bodies = iter(variable_parts)
        for part in fixed_parts:
            if part is None:
                Uint32(offset).serialize(stream)
                offset += len(next(bodies))
            else:
                stream.write(part)

        for body in variable_parts:
            stream.write(body)

        return offset

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read a container from a binary stream.

        Args:
            stream: Binary stream to read from.
            scope: Total bytes available for this container.

        Raises:
            SSZDecodeError: If the stream ends early or the offsets are inconsistent.
        """
        fields: dict[str, Any] = {}
        variable_fields: list[tuple[str, Type[SSZType], int]] = []
        fixed_length = 0

        # Fixed part: fixed-size values and the offsets of variable-size ones.
        for name, field_type in cls._field_types():
            size = field_type.get_byte_length() if field_type.is_fixed_size() else None
            data = stream.read(OFFSET_BYTE_LENGTH if size is None else size)
            if len(data) != (OFFSET_BYTE_LENGTH if size is None else size):
                raise SSZDecodeError(cls.__name__, f"unexpected end of data reading '{name}'")
            if size is None:
                variable_fields.append((name, field_type, int(Uint32.decode_bytes(data))))
            else:
                fields[name] = field_type.decode_bytes(data)
            fixed_length += len(data)

        if variable_fields:
            section = stream.read(scope - fixed_length)
            if len(section) != scope - fixed_length:
                raise SSZDecodeError(cls.__name__, "unexpected end of data in variable section")

            ends = [offset for _, _, offset in variable_fields[1:]] + [scope]
            for (name, field_type, start), end in zip(variable_fields, ends):
                if start < fixed_length or start > end:
                    raise SSZDecodeError(
                        cls.__name__, f"invalid offsets for '{name}' (start={start}, end={end})"
                    )
                fields[name] = field_type.decode_bytes(
                    section[start - fixed_length : end - fixed_length]
                )

        return cls(**fields)
