"""Configuration of the replicated store the signers write to."""

from .config import (
    SIGNERS_STACKERDB_CONFIG,
    HintReplica,
    HintReplicas,
    ReplicaAddress,
    StackerDBConfig,
)

__all__ = [
    "HintReplica",
    "HintReplicas",
    "ReplicaAddress",
    "SIGNERS_STACKERDB_CONFIG",
    "StackerDBConfig",
]
