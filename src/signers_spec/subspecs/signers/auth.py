"""
Write authorization for the signer slot registry.

The registry itself accepts any write. The host decides who may write by
placing a `GuardedSlotRegistry` in front of it with a caller check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import SupportsInt

from signers_spec.subspecs import metrics
from signers_spec.types import Uint128

from ..principal import StandardPrincipal
from ..stackerdb import StackerDBConfig
from .errors import PrivilegeDenied
from .registry import SlotRegistry
from .result import Err, Result
from .types import SignerSlot, SignerSlots

logger = logging.getLogger(__name__)

CallerCheck = Callable[[StandardPrincipal], bool]
"""Predicate deciding whether a principal may write the registry."""


def allow_only(*principals: StandardPrincipal) -> CallerCheck:
    """Build a check that admits exactly the given principals."""
    allowed = frozenset(principals)

    def is_allowed(caller: StandardPrincipal) -> bool:
        return caller in allowed

    return is_allowed


@dataclass(frozen=True, slots=True)
class GuardedSlotRegistry:
    """
    A registry whose write path is gated by a caller check.

    Reads pass straight through to the wrapped registry.
    """

    registry: SlotRegistry
    """The registry being guarded."""

    is_authorized: CallerCheck
    """Decides whether a caller may write."""

    def set_signer_slots(
        self,
        caller: StandardPrincipal,
        signer_slots: SignerSlots | Sequence[SignerSlot],
        reward_cycle: SupportsInt,
    ) -> Result[None]:
        """
        Write on behalf of `caller`.

        Returns:
            `Err(PrivilegeDenied)` without touching the registry if the check
            refuses `caller`; otherwise the registry's own result.
        """
        if not self.is_authorized(caller):
            metrics.slot_writes_rejected.labels(reason="privilege_denied").inc()
            logger.warning("Refused signer slot write from %s", caller)
            return Err(PrivilegeDenied(caller))
        return self.registry.set_signer_slots(signer_slots, reward_cycle)

    def get_signer_slots(self) -> Result[SignerSlots]:
        """Return the stored slot assignments."""
        return self.registry.get_signer_slots()

    def get_signer_slots_for(
        self, signer: StandardPrincipal, reward_cycle: SupportsInt
    ) -> Result[Uint128]:
        """Return the number of slots `signer` holds in `reward_cycle`."""
        return self.registry.get_signer_slots_for(signer, reward_cycle)

    def get_config(self) -> Result[StackerDBConfig]:
        """Return the signers StackerDB configuration."""
        return self.registry.get_config()
