"""Base classes and interfaces for all SSZ types."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import IO

from typing_extensions import Self

from .base import StrictBaseModel


class SSZType(ABC):
    """
    Abstract base class for every value with a canonical byte encoding.

    Registry states are persisted and served over HTTP in this encoding, so
    every field type of a container must implement this interface.
    """

    @classmethod
    @abstractmethod
    def is_fixed_size(cls) -> bool:
        """Return True if every value of the type encodes to the same length."""
        ...

    @classmethod
    @abstractmethod
    def get_byte_length(cls) -> int:
        """
        Get the byte length of the type if it is fixed-size.

        Raises:
            SSZTypeError: If the type is variable-size.
        """
        ...

    @abstractmethod
    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the encoded value to a binary stream.

        Args:
            stream: The stream to write to.

        Returns:
            The number of bytes written.
        """
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read a value from a binary stream.

        Args:
            stream: The stream to read from.
            scope: The number of bytes available for this value.
        """
        ...

    def encode_bytes(self) -> bytes:
        """Encode the value to a byte string."""
        with io.BytesIO() as stream:
            self.serialize(stream)
            return stream.getvalue()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Decode a value from a byte string that holds exactly one encoding."""
        with io.BytesIO(data) as stream:
            return cls.deserialize(stream, len(data))


class SSZModel(StrictBaseModel, SSZType):
    """Base class for pydantic-validated SSZ collections."""
