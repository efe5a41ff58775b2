"""
Abstract database interface for registry persistence.

Defines the Protocol that all database implementations must follow.
Uses structural subtyping for flexibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from signers_spec.subspecs.signers.types import RegistryState


class Database(Protocol):
    """
    Protocol for registry state storage.

    The registry keeps exactly one state, so storage is a single record that
    each write replaces. Any class with matching methods satisfies the protocol.
    """

    def get_registry_state(self) -> RegistryState | None:
        """
        Retrieve the stored registry state.

        Returns:
            The state, or None if nothing has been stored yet.
        """
        ...

    def put_registry_state(self, state: RegistryState) -> None:
        """
        Replace the stored registry state.

        Must be atomic: after a failure the previous state is still stored.

        Args:
            state: The new state.
        """
        ...

    def close(self) -> None:
        """Release the underlying resources."""
        ...
