"""Error kinds reported by the signer slot registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..principal import StandardPrincipal


class RegistryError(Exception):
    """
    Base exception for all registry errors.

    Registry operations return these inside `Err` rather than raising them.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class CapacityExceeded(RegistryError):
    """
    A write would store more slot assignments than the registry can hold.

    Attributes:
        limit: The maximum number of assignments.
        actual: The number of assignments in the rejected write.
    """

    def __init__(self, *, limit: int, actual: int) -> None:
        self.limit = limit
        self.actual = actual
        super().__init__(f"Signer slot list cannot exceed {limit} entries, got {actual}")


class PrivilegeDenied(RegistryError):
    """
    A caller without write privilege attempted to set the slot assignments.

    Attributes:
        caller: The principal that was refused.
    """

    def __init__(self, caller: StandardPrincipal) -> None:
        self.caller = caller
        super().__init__(f"Principal {caller} is not allowed to set signer slots")
