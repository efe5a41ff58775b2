"""Registry containers: slot assignments and the registry state."""

from __future__ import annotations

from signers_spec.types import Container, SSZList, Uint128

from ..chain.config import REGISTRY_CONFIG
from ..principal import StandardPrincipal


class SignerSlot(Container):
    """One signer's write-slot allotment for the stored reward cycle."""

    signer: StandardPrincipal
    """The signer holding the slots."""

    num_slots: Uint128
    """Number of StackerDB write slots assigned to the signer."""


class SignerSlots(SSZList[SignerSlot]):
    """
    Ordered slot assignments, insertion order preserved.

    Bounded at 4000 entries; constructing a longer list raises `SSZLengthError`.
    """

    ELEMENT_TYPE = SignerSlot
    LIMIT = int(REGISTRY_CONFIG.signer_slots_max_length)

    @property
    def total_slots(self) -> int:
        """Sum of the slot counts of every entry."""
        return sum(int(entry.num_slots) for entry in self.data)


class RegistryState(Container):
    """
    The registry's stored state.

    Replaced as a whole on every write, so the cycle and the list it belongs
    to always change together.
    """

    last_set_cycle: Uint128
    """Reward cycle passed to the most recent successful write."""

    slots: SignerSlots
    """The slot assignments stored by that write."""

    @classmethod
    def genesis(cls) -> RegistryState:
        """The state at deployment: cycle 0 and no assignments."""
        return cls(last_set_cycle=Uint128(0), slots=SignerSlots(data=[]))
