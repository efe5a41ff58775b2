"""
Notifications emitted after the slot assignments change.

Observers are plain callables. They run after the new state is committed,
so a failing observer is logged and cannot undo or block the write.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from signers_spec.types import Uint128

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SignerSlotsUpdated:
    """A new slot assignment list was committed."""

    reward_cycle: Uint128
    """Cycle the new list was set for."""

    previous_cycle: Uint128
    """Cycle of the list it replaced."""

    num_signers: int
    """Number of entries in the new list."""

    total_slots: int
    """Sum of slot counts in the new list."""


Observer = Callable[[SignerSlotsUpdated], None]
"""Callback receiving registry update events."""


@dataclass(slots=True)
class EventDispatcher:
    """Fan-out of registry events to registered observers, in registration order."""

    _observers: list[Observer] = field(default_factory=list)

    def register(self, observer: Observer) -> None:
        """Add an observer."""
        self._observers.append(observer)

    def dispatch(self, event: SignerSlotsUpdated) -> None:
        """Deliver `event` to every observer."""
        for observer in self._observers:
            try:
                observer(event)
            except Exception as e:
                logger.warning("Registry observer %r failed: %s", observer, e)
