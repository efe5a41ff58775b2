"""Reusable type definitions for the signer slot registry."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes20
from .collections import SSZList
from .container import Container
from .exceptions import (
    SSZDecodeError,
    SSZError,
    SSZLengthError,
    SSZOverflowError,
    SSZSerializationError,
    SSZTypeError,
    SSZValueError,
)
from .ssz_base import SSZType
from .uint import BaseUint, Uint8, Uint32, Uint128

__all__ = [
    # Core types
    "BaseUint",
    "Uint8",
    "Uint32",
    "Uint128",
    "BaseBytes",
    "Bytes20",
    "StrictBaseModel",
    "SSZList",
    "SSZType",
    "Container",
    # Exceptions
    "SSZError",
    "SSZTypeError",
    "SSZValueError",
    "SSZOverflowError",
    "SSZLengthError",
    "SSZSerializationError",
    "SSZDecodeError",
]
