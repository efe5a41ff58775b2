"""Exception hierarchy for the SSZ type system."""

from __future__ import annotations


class SSZError(Exception):
    """
    Base exception for all SSZ-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class SSZTypeError(SSZError):
    """Raised when a type is misdefined or a value has the wrong type."""


class SSZValueError(SSZError):
    """
    Base class for value-related errors.

    Raised when a value is invalid for an SSZ type, even if its Python type is correct.
    """


class SSZOverflowError(SSZValueError):
    """
    Raised when a number does not fit an unsigned integer type.

    Attributes:
        value: The rejected value.
        type_name: The unsigned integer type.
        max_value: The largest value the type can hold.
    """

    def __init__(self, value: int, type_name: str, *, max_value: int) -> None:
        self.value = value
        self.type_name = type_name
        self.max_value = max_value

        super().__init__(f"{value} is out of range for {type_name} (valid range: [0, {max_value}])")


class SSZLengthError(SSZValueError):
    """
    Raised when a sequence has an invalid number of elements.

    Attributes:
        type_name: The SSZ type with the length constraint.
        expected: The expected length (exact, or the maximum for lists).
        actual: The length received.
        is_limit: True if `expected` is a maximum rather than an exact length.
    """

    def __init__(
        self,
        type_name: str,
        *,
        expected: int,
        actual: int,
        is_limit: bool = False,
    ) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        self.is_limit = is_limit

        if is_limit:
            msg = f"{type_name} cannot exceed {expected} elements, got {actual}"
        else:
            msg = f"{type_name} requires exactly {expected} elements, got {actual}"

        super().__init__(msg)


class SSZSerializationError(SSZError):
    """Base class for serialization-related errors."""


class SSZDecodeError(SSZSerializationError):
    """
    Raised when bytes cannot be decoded into a value.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Failed to decode {type_name}: {detail}")
