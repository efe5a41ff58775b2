"""API endpoint handlers."""

from . import health, metrics, signers, stackerdb

__all__ = [
    "health",
    "metrics",
    "signers",
    "stackerdb",
]
