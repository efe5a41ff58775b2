"""Encoding constants shared by the SSZ types."""

from __future__ import annotations

from typing import Final

OFFSET_BYTE_LENGTH: Final = 4
"""Width in bytes of the offset written for each variable-size element."""
