"""
API server module for the signer slot registry.

Provides HTTP endpoints for:
- /signers/v0/slots - Current slot assignments
- /signers/v0/slots/{signer}/{reward_cycle} - Slots held by one signer
- /signers/v0/stackerdb/config - The signers StackerDB configuration
- /signers/v0/health - Health check endpoint

Also provides a client for fetching the assignments from a node:
- fetch_signer_slots: Download the current slot list
"""

from .client import RegistrySyncError, fetch_signer_slots
from .server import ApiServer, ApiServerConfig

__all__ = [
    "ApiServer",
    "ApiServerConfig",
    "RegistrySyncError",
    "fetch_signer_slots",
]
