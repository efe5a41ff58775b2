"""Tests for the signer slot registry."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from hypothesis import given
from hypothesis import strategies as st

from signers_spec.subspecs import metrics
from signers_spec.subspecs.principal import StandardPrincipal
from signers_spec.subspecs.signers import (
    CapacityExceeded,
    Err,
    Ok,
    RegistryState,
    SignerSlot,
    SignerSlots,
    SlotRegistry,
)
from signers_spec.subspecs.stackerdb import SIGNERS_STACKERDB_CONFIG
from signers_spec.types import SSZOverflowError, Uint128

from tests.signers_spec.helpers import make_principal, make_slots


class TestInitialState:
    """Tests for a registry that has never been written."""

    def test_starts_empty(self, registry: SlotRegistry) -> None:
        """A new registry holds no assignments and cycle 0."""
        slots = registry.get_signer_slots().unwrap()

        assert len(slots) == 0
        assert registry.last_set_cycle == Uint128(0)

    def test_genesis_state(self) -> None:
        """The genesis state is cycle 0 with an empty list."""
        state = RegistryState.genesis()

        assert state.last_set_cycle == Uint128(0)
        assert len(state.slots) == 0

    def test_initial_state_can_be_supplied(self) -> None:
        """A registry can start from a given state."""
        state = RegistryState(last_set_cycle=Uint128(4), slots=make_slots(1, 2))
        registry = SlotRegistry(state=state)

        assert registry.state is state
        assert registry.last_set_cycle == Uint128(4)


class TestSetSignerSlots:
    """Tests for writing slot assignments."""

    def test_round_trip(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """A stored list is read back in the same order."""
        slots = slots_factory(1, 2)

        assert registry.set_signer_slots(slots, 5) == Ok(None)

        stored = registry.get_signer_slots().unwrap()
        assert stored == slots
        assert [int(entry.num_slots) for entry in stored] == [1, 2]
        assert stored[0].signer == make_principal(0)
        assert registry.last_set_cycle == Uint128(5)

    def test_accepts_plain_sequence(self, registry: SlotRegistry) -> None:
        """A list of SignerSlot values is wrapped into SignerSlots."""
        entries = [SignerSlot(signer=make_principal(3), num_slots=Uint128(7))]

        assert registry.set_signer_slots(entries, Uint128(1)).is_ok()
        assert list(registry.get_signer_slots().unwrap()) == entries

    def test_empty_list_is_valid(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """Writing an empty list clears the assignments but keeps the cycle."""
        registry.set_signer_slots(slots_factory(1), 3)

        assert registry.set_signer_slots([], 4).is_ok()
        assert len(registry.get_signer_slots().unwrap()) == 0
        assert registry.last_set_cycle == Uint128(4)

    def test_full_capacity_accepted(self, registry: SlotRegistry) -> None:
        """Exactly 4000 entries are stored."""
        entries = [SignerSlot(signer=make_principal(i), num_slots=Uint128(1)) for i in range(4000)]

        assert registry.set_signer_slots(entries, 1).is_ok()
        assert len(registry.get_signer_slots().unwrap()) == 4000

    def test_over_capacity_rejected(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """4001 entries are refused and nothing changes."""
        previous = slots_factory(3, 3)
        registry.set_signer_slots(previous, 9)
        entries = [SignerSlot(signer=make_principal(i), num_slots=Uint128(1)) for i in range(4001)]

        result = registry.set_signer_slots(entries, 10)

        assert isinstance(result, Err)
        assert isinstance(result.error, CapacityExceeded)
        assert result.error.limit == 4000
        assert result.error.actual == 4001
        assert registry.get_signer_slots().unwrap() == previous
        assert registry.last_set_cycle == Uint128(9)

    def test_rejection_is_counted(self, registry: SlotRegistry) -> None:
        """A capacity rejection increments the rejection counter."""
        counter = metrics.slot_writes_rejected.labels(reason="capacity_exceeded")
        before = counter._value.get()
        entries = [SignerSlot(signer=make_principal(0), num_slots=Uint128(1))] * 4001

        registry.set_signer_slots(entries, 1)

        assert counter._value.get() == before + 1

    def test_earlier_cycle_overwrites(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """Cycles need not increase: an earlier cycle replaces a later one."""
        registry.set_signer_slots(slots_factory(1), 10)
        older = slots_factory(4, 4, 4)

        assert registry.set_signer_slots(older, 3).is_ok()
        assert registry.last_set_cycle == Uint128(3)
        assert registry.get_signer_slots().unwrap() == older

    def test_duplicates_and_zero_counts_stored_verbatim(self, registry: SlotRegistry) -> None:
        """The registry does not deduplicate signers or reject zero counts."""
        principal = make_principal(1)
        entries = [
            SignerSlot(signer=principal, num_slots=Uint128(0)),
            SignerSlot(signer=principal, num_slots=Uint128(2)),
        ]

        assert registry.set_signer_slots(entries, 1).is_ok()
        assert list(registry.get_signer_slots().unwrap()) == entries

    def test_same_cycle_rewrite(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """Writing the same cycle twice keeps the second list."""
        registry.set_signer_slots(slots_factory(1), 2)
        registry.set_signer_slots(slots_factory(5), 2)

        assert registry.get_signer_slots().unwrap() == slots_factory(5)

    def test_cycle_out_of_range(self, registry: SlotRegistry) -> None:
        """A negative cycle cannot be represented."""
        with pytest.raises(SSZOverflowError):
            registry.set_signer_slots([], -1)

    def test_metrics_follow_state(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """Gauges report the committed state."""
        registry.set_signer_slots(slots_factory(2, 3), 42)

        assert metrics.last_set_cycle._value.get() == 42.0
        assert metrics.signers_count._value.get() == 2.0
        assert metrics.total_slots._value.get() == 5.0

    @given(
        counts=st.lists(st.integers(min_value=0, max_value=2**128 - 1), max_size=20),
        cycle=st.integers(min_value=0, max_value=2**128 - 1),
    )
    def test_any_valid_write_reads_back(self, counts: list[int], cycle: int) -> None:
        """Whatever is written within bounds is read back unchanged."""
        registry = SlotRegistry()
        slots = make_slots(*counts)

        assert registry.set_signer_slots(slots, cycle).is_ok()
        assert registry.get_signer_slots().unwrap() == slots
        assert registry.last_set_cycle == Uint128(cycle)


class TestReads:
    """Tests for the read-only operations."""

    def test_config_is_constant(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """The configuration does not depend on the stored assignments."""
        before = registry.get_config().unwrap()
        registry.set_signer_slots(slots_factory(9, 9), 7)

        assert before == SIGNERS_STACKERDB_CONFIG
        assert registry.get_config().unwrap() == before

    def test_slots_for_is_always_one(
        self,
        registry: SlotRegistry,
        signer: StandardPrincipal,
        slots_factory: Callable[..., SignerSlots],
    ) -> None:
        """Every signer holds one slot in every cycle, listed or not."""
        assert registry.get_signer_slots_for(signer, 0).unwrap() == Uint128(1)

        registry.set_signer_slots(
            [SignerSlot(signer=signer, num_slots=Uint128(13))], 8
        )

        assert registry.get_signer_slots_for(signer, 8).unwrap() == Uint128(1)
        assert registry.get_signer_slots_for(make_principal(200), 1000).unwrap() == Uint128(1)

    def test_slots_for_is_a_uint128(
        self, registry: SlotRegistry, signer: StandardPrincipal
    ) -> None:
        """The count is a Uint128: plain-int comparison needs int()."""
        count = registry.get_signer_slots_for(signer, 3).unwrap()

        assert type(count) is Uint128
        assert int(count) == 1
        with pytest.raises(TypeError):
            _ = count == 1

    def test_reads_do_not_change_state(
        self, registry: SlotRegistry, slots_factory: Callable[..., SignerSlots]
    ) -> None:
        """Reading leaves the state object untouched."""
        registry.set_signer_slots(slots_factory(1), 1)
        state = registry.state

        registry.get_signer_slots()
        registry.get_signer_slots_for(make_principal(0), 1)
        registry.get_config()

        assert registry.state is state
