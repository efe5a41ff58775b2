"""
Shared pytest fixtures for signers_spec tests.

Provides principals, slot lists and registries used across test modules.
"""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest

from signers_spec.subspecs.principal import StandardPrincipal
from signers_spec.subspecs.signers import SignerSlots, SlotRegistry
from signers_spec.subspecs.storage import SQLiteDatabase
from tests.signers_spec.helpers import BOOT_TESTNET_ADDRESS, SIGNER_ADDRESS, make_slots


@pytest.fixture
def boot_principal() -> StandardPrincipal:
    """The testnet boot-code principal."""
    return StandardPrincipal.from_address(BOOT_TESTNET_ADDRESS)


@pytest.fixture
def signer() -> StandardPrincipal:
    """An ordinary testnet signer."""
    return StandardPrincipal.from_address(SIGNER_ADDRESS)


@pytest.fixture
def slots_factory() -> Callable[..., SignerSlots]:
    """Factory building slot lists from per-signer slot counts."""
    return make_slots


@pytest.fixture
def registry() -> SlotRegistry:
    """A fresh in-memory registry at genesis."""
    return SlotRegistry()


@pytest.fixture
def db() -> Generator[SQLiteDatabase, None, None]:
    """Create an in-memory SQLite database for testing."""
    database = SQLiteDatabase(":memory:")
    yield database
    database.close()
