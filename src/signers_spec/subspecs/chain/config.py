"""
Registry and StackerDB Configuration Presets

This file defines the list bounds, the signers StackerDB parameters and the
boot-code principals for each network.
"""

from typing_extensions import Final

from signers_spec.config import SIGNERS_ENV
from signers_spec.types import StrictBaseModel, Uint128

# --- Registry Presets ---

SIGNER_SLOTS_MAX_LENGTH: Final = Uint128(4000)
"""The maximum number of slot assignments the registry can hold."""

# --- StackerDB Parameters ---

CHUNK_SIZE: Final = Uint128(2 * 1024 * 1024)
"""Maximum size in bytes of a single chunk written to the signers StackerDB."""

WRITE_FREQ: Final = Uint128(0)
"""Minimum seconds between writes to the same slot. Zero means unthrottled."""

MAX_WRITES: Final = Uint128(Uint128.max_value())
"""Maximum number of writes per slot. Effectively unbounded."""

MAX_NEIGHBORS: Final = Uint128(32)
"""Maximum number of replica neighbors a node keeps for this StackerDB."""

HINT_REPLICAS_LIMIT: Final = Uint128(128)
"""Maximum number of hint replicas the configuration may list."""

HINT_REPLICA_ADDR_LIMIT: Final = Uint128(16)
"""Maximum number of address components in a single hint replica."""

# --- Network Principals ---

BOOT_ADDRESS_MAINNET: Final = "SP000000000000000000002Q6VF78"
"""Boot-code principal on mainnet. The only default writer of the registry."""

BOOT_ADDRESS_TESTNET: Final = "ST000000000000000000002AMW42H"
"""Boot-code principal on testnet. The only default writer of the registry."""

BOOT_ADDRESSES: Final = {
    "mainnet": BOOT_ADDRESS_MAINNET,
    "testnet": BOOT_ADDRESS_TESTNET,
}
"""Boot-code principal per network name."""

DEFAULT_NETWORK: Final = "testnet" if SIGNERS_ENV == "test" else "mainnet"
"""Network assumed when none is given explicitly."""


class _RegistryConfig(StrictBaseModel):
    """
    A model holding the canonical, immutable configuration constants
    for the registry and its StackerDB.
    """

    # Registry Presets
    signer_slots_max_length: Uint128

    # StackerDB Parameters
    chunk_size: Uint128
    write_freq: Uint128
    max_writes: Uint128
    max_neighbors: Uint128
    hint_replicas_limit: Uint128
    hint_replica_addr_limit: Uint128


REGISTRY_CONFIG: Final = _RegistryConfig(
    signer_slots_max_length=SIGNER_SLOTS_MAX_LENGTH,
    chunk_size=CHUNK_SIZE,
    write_freq=WRITE_FREQ,
    max_writes=MAX_WRITES,
    max_neighbors=MAX_NEIGHBORS,
    hint_replicas_limit=HINT_REPLICAS_LIMIT,
    hint_replica_addr_limit=HINT_REPLICA_ADDR_LIMIT,
)
"""The registry configuration shared by every network."""
