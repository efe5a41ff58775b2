"""
Explicit success/failure values for registry operations.

Every registry operation returns `Ok` or `Err`, even those that cannot fail
today, so validation can be added later without changing what callers check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .errors import RegistryError

T = TypeVar("T")
"""Type of the value carried by a successful result."""


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome carrying `value`."""

    value: T
    """The operation's return value."""

    def is_ok(self) -> bool:
        """Always True."""
        return True

    def is_err(self) -> bool:
        """Always False."""
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """A failed outcome carrying the error that explains it."""

    error: RegistryError
    """Why the operation did not apply."""

    def is_ok(self) -> bool:
        """Always False."""
        return False

    def is_err(self) -> bool:
        """Always True."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err]
"""Outcome of a registry operation: `Ok[T]` on success, `Err` otherwise."""
