"""Slot assignment file loader.

Operators hand the registry a new assignment as YAML:

    REWARD_CYCLE: 12
    SIGNER_SLOTS:
    - signer: ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM
      num_slots: 1
    - signer: ST000000000000000000002AMW42H
      num_slots: 2
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator

from signers_spec.types import SSZOverflowError, StrictBaseModel, Uint128

from ..principal import StandardPrincipal
from .types import SignerSlot


class SlotAssignmentFile(StrictBaseModel):
    """
    A complete slot assignment for one reward cycle.

    The list is not bounded here: an over-long file still loads, and the
    registry reports it as `CapacityExceeded` when it is applied.

    Field names use UPPERCASE in YAML; aliases map them to snake_case.
    """

    reward_cycle: Uint128 = Field(alias="REWARD_CYCLE")
    """Reward cycle the assignment is for."""

    signer_slots: list[SignerSlot] = Field(alias="SIGNER_SLOTS")
    """Assignments in the order they will be stored."""

    @field_validator("reward_cycle", mode="before")
    @classmethod
    def parse_reward_cycle(cls, v: Any) -> Uint128:
        """Accept a plain integer cycle."""
        try:
            return Uint128(v)
        except (SSZOverflowError, TypeError) as e:
            raise ValueError(str(e)) from e

    @field_validator("signer_slots", mode="before")
    @classmethod
    def parse_signer_slots(cls, v: Any) -> list[SignerSlot]:
        """Convert `{signer: <address>, num_slots: <int>}` mappings to `SignerSlot`s."""
        if v is None:
            return []
        if not isinstance(v, list):
            raise ValueError(f"SIGNER_SLOTS must be a list, got {type(v).__name__}")

        result = []
        for entry in v:
            if isinstance(entry, SignerSlot):
                result.append(entry)
                continue
            if not isinstance(entry, dict) or set(entry) != {"signer", "num_slots"}:
                raise ValueError(f"Each entry needs exactly 'signer' and 'num_slots': {entry!r}")
            try:
                num_slots = Uint128(entry["num_slots"])
            except (SSZOverflowError, TypeError) as e:
                raise ValueError(str(e)) from e
            # InvalidAddressError is a ValueError, so pydantic reports it as well.
            signer = StandardPrincipal.from_address(str(entry["signer"]))
            result.append(SignerSlot(signer=signer, num_slots=num_slots))
        return result

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> SlotAssignmentFile:
        """
        Load an assignment from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, content: str) -> SlotAssignmentFile:
        """Load an assignment from a YAML string."""
        return cls.model_validate(yaml.safe_load(content))
