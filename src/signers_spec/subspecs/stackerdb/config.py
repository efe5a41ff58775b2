"""StackerDB configuration containers and the signers StackerDB constant."""

from __future__ import annotations

from typing_extensions import Final

from signers_spec.types import Bytes20, Container, SSZList, Uint128

from ..chain.config import REGISTRY_CONFIG


class ReplicaAddress(SSZList[Uint128]):
    """Address components of a hint replica (e.g. the four octets of an IPv4 address)."""

    ELEMENT_TYPE = Uint128
    LIMIT = int(REGISTRY_CONFIG.hint_replica_addr_limit)


class HintReplica(Container):
    """A peer that is known to replicate the StackerDB."""

    addr: ReplicaAddress
    """Network address of the replica."""

    port: Uint128
    """Port the replica listens on."""

    public_key_hash: Bytes20
    """hash160 of the replica's node public key."""


class HintReplicas(SSZList[HintReplica]):
    """Bounded list of hint replicas."""

    ELEMENT_TYPE = HintReplica
    LIMIT = int(REGISTRY_CONFIG.hint_replicas_limit)


class StackerDBConfig(Container):
    """
    Access configuration of a StackerDB.

    Nodes read this to decide how large chunks may be, how often and how many
    times a slot may be written, and how many replica neighbors to keep.
    """

    chunk_size: Uint128
    """Maximum chunk size in bytes."""

    write_freq: Uint128
    """Minimum seconds between writes to the same slot."""

    max_writes: Uint128
    """Maximum number of writes per slot."""

    max_neighbors: Uint128
    """Maximum number of replica neighbors."""

    hint_replicas: HintReplicas
    """Replicas a node may contact to bootstrap."""


SIGNERS_STACKERDB_CONFIG: Final = StackerDBConfig(
    chunk_size=REGISTRY_CONFIG.chunk_size,
    write_freq=REGISTRY_CONFIG.write_freq,
    max_writes=REGISTRY_CONFIG.max_writes,
    max_neighbors=REGISTRY_CONFIG.max_neighbors,
    hint_replicas=HintReplicas(data=[]),
)
"""
The configuration of the signers StackerDB.

It is pure constant data, unrelated to which signers currently hold slots.
"""
