"""Presets for the registry and the signers StackerDB."""

from .config import BOOT_ADDRESSES, DEFAULT_NETWORK, REGISTRY_CONFIG

__all__ = [
    "BOOT_ADDRESSES",
    "DEFAULT_NETWORK",
    "REGISTRY_CONFIG",
]
