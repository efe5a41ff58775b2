"""
Metric registry using prometheus_client.

Provides pre-defined metrics for the signer slot registry.
Exposes metrics in Prometheus text format via the /metrics endpoint.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)

# Create a dedicated registry for signer slot metrics.
#
# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Registry State
# -----------------------------------------------------------------------------

last_set_cycle = Gauge(
    "signers_last_set_cycle",
    "Reward cycle of the most recent slot assignment write",
    registry=REGISTRY,
)

signers_count = Gauge(
    "signers_count",
    "Number of signers holding slots",
    registry=REGISTRY,
)

total_slots = Gauge(
    "signers_total_slots",
    "Sum of write slots across all signers",
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Writes
# -----------------------------------------------------------------------------

slot_writes = Counter(
    "signers_slot_writes_total",
    "Slot assignment lists committed to the registry",
    registry=REGISTRY,
)

slot_writes_rejected = Counter(
    "signers_slot_writes_rejected_total",
    "Slot assignment writes rejected before touching state",
    ["reason"],
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
