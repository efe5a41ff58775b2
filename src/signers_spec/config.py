"""
Global configuration for the signer slot registry.

This module contains environment-specific settings that apply across all subspecs.
"""

import os

_SUPPORTED_SIGNERS_ENVS: list[str] = ["prod", "test"]

SIGNERS_ENV = os.environ.get("SIGNERS_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if SIGNERS_ENV not in _SUPPORTED_SIGNERS_ENVS:
    raise ValueError(
        f"Invalid SIGNERS_ENV environment variable: '{SIGNERS_ENV}'. "
        f"Supported values: {_SUPPORTED_SIGNERS_ENVS}"
    )
