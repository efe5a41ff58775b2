"""
The signer slot registry.

Holds which signers own write slots in the signers StackerDB and the reward
cycle that assignment was set for, and serves the StackerDB configuration.

The registry stores whatever a privileged caller supplies. Beyond the
4000-entry bound it does not check the cycle against the previous one, the
signers for duplicates, or the slot counts for plausibility; deciding what a
valid assignment is belongs to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, SupportsInt

from signers_spec.subspecs import metrics
from signers_spec.types import Uint128

from ..principal import StandardPrincipal
from ..stackerdb import SIGNERS_STACKERDB_CONFIG, StackerDBConfig
from .errors import CapacityExceeded
from .events import EventDispatcher, Observer, SignerSlotsUpdated
from .result import Err, Ok, Result
from .types import RegistryState, SignerSlot, SignerSlots

if TYPE_CHECKING:
    from ..storage import Database

logger = logging.getLogger(__name__)


class SlotRegistry:
    """
    Owner of the single registry state.

    Every operation returns a `Result`. Writes replace the whole state at
    once: the new state is persisted (when a database is attached) before it
    becomes visible, so a failed write leaves both copies unchanged.

    Authorization is not enforced here; compose a `GuardedSlotRegistry` in
    front of the registry for that.
    """

    def __init__(
        self,
        state: RegistryState | None = None,
        database: Database | None = None,
    ) -> None:
        """
        Create a registry.

        Args:
            state: Initial state. Defaults to the genesis state.
            database: Optional storage every committed state is written to.
        """
        self._state = state if state is not None else RegistryState.genesis()
        self._database = database
        self._events = EventDispatcher()

    @classmethod
    def from_database(cls, database: Database) -> SlotRegistry:
        """Resume from the state stored in `database`, or start from genesis."""
        state = database.get_registry_state()
        if state is None:
            logger.info("No stored registry state, starting from genesis")
        else:
            logger.info(
                "Loaded registry state for cycle %s with %d signers",
                state.last_set_cycle,
                len(state.slots),
            )
        registry = cls(state=state, database=database)
        registry._record_metrics()
        return registry

    @property
    def state(self) -> RegistryState:
        """The current registry state."""
        return self._state

    @property
    def last_set_cycle(self) -> Uint128:
        """Reward cycle of the most recent successful write (0 before any write)."""
        return self._state.last_set_cycle

    def subscribe(self, observer: Observer) -> None:
        """Register a callback run after each committed write."""
        self._events.register(observer)

    def set_signer_slots(
        self,
        signer_slots: SignerSlots | Sequence[SignerSlot],
        reward_cycle: SupportsInt,
    ) -> Result[None]:
        """
        Replace the slot assignments and the cycle they belong to.

        Args:
            signer_slots: The complete new assignment list, in order.
            reward_cycle: The cycle the list is for. Any value is accepted,
                including one earlier than the current cycle.

        Returns:
            `Ok(None)` once committed, or `Err(CapacityExceeded)` if the list
            is longer than 4000 entries, in which case nothing changes.
        """
        limit = SignerSlots.LIMIT
        if len(signer_slots) > limit:
            metrics.slot_writes_rejected.labels(reason="capacity_exceeded").inc()
            logger.warning(
                "Rejected signer slot list of %d entries (limit %d)", len(signer_slots), limit
            )
            return Err(CapacityExceeded(limit=limit, actual=len(signer_slots)))

        slots = (
            signer_slots
            if isinstance(signer_slots, SignerSlots)
            else SignerSlots(data=signer_slots)
        )
        previous = self._state
        new_state = RegistryState(last_set_cycle=Uint128(reward_cycle), slots=slots)

        if self._database is not None:
            self._database.put_registry_state(new_state)
        self._state = new_state

        logger.info(
            "Set %d signer slot entries for reward cycle %s (previous cycle %s)",
            len(slots),
            new_state.last_set_cycle,
            previous.last_set_cycle,
        )
        metrics.slot_writes.inc()
        self._record_metrics()
        self._events.dispatch(
            SignerSlotsUpdated(
                reward_cycle=new_state.last_set_cycle,
                previous_cycle=previous.last_set_cycle,
                num_signers=len(slots),
                total_slots=slots.total_slots,
            )
        )
        return Ok(None)

    def get_signer_slots(self) -> Result[SignerSlots]:
        """Return the stored slot assignments."""
        return Ok(self._state.slots)

    def get_signer_slots_for(
        self, signer: StandardPrincipal, reward_cycle: SupportsInt
    ) -> Result[Uint128]:
        """
        Return the number of slots `signer` holds in `reward_cycle`.

        Currently every signer is granted one slot in every cycle: the stored
        assignments are not consulted. The value is `Uint128(1)`, which only
        compares equal to another `Uint128`; use `int()` to compare with a
        plain integer.
        """
        # TODO: look the signer up in the assignments once per-signer slot
        # counts are decided for this query; callers rely on the constant today.
        logger.debug("Slot lookup for %s in cycle %s", signer, int(reward_cycle))
        return Ok(Uint128(1))

    def get_config(self) -> Result[StackerDBConfig]:
        """Return the signers StackerDB configuration."""
        return Ok(SIGNERS_STACKERDB_CONFIG)

    def _record_metrics(self) -> None:
        metrics.last_set_cycle.set(int(self._state.last_set_cycle))
        metrics.signers_count.set(len(self._state.slots))
        metrics.total_slots.set(self._state.slots.total_slots)
