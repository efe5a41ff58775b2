"""
Metrics module for observability.

Provides counters and gauges tracking the signer slot registry.
Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    generate_metrics,
    last_set_cycle,
    signers_count,
    slot_writes,
    slot_writes_rejected,
    total_slots,
)

__all__ = [
    "REGISTRY",
    "generate_metrics",
    "last_set_cycle",
    "signers_count",
    "slot_writes",
    "slot_writes_rejected",
    "total_slots",
]
