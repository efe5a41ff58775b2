"""
The signer slot registry.

Tracks which signers hold write slots in the signers StackerDB, and for which
reward cycle, and serves the StackerDB configuration.
"""

from .assignment_file import SlotAssignmentFile
from .auth import CallerCheck, GuardedSlotRegistry, allow_only
from .errors import CapacityExceeded, PrivilegeDenied, RegistryError
from .events import EventDispatcher, Observer, SignerSlotsUpdated
from .registry import SlotRegistry
from .result import Err, Ok, Result
from .types import RegistryState, SignerSlot, SignerSlots

__all__ = [
    "CallerCheck",
    "CapacityExceeded",
    "Err",
    "EventDispatcher",
    "GuardedSlotRegistry",
    "Observer",
    "Ok",
    "PrivilegeDenied",
    "RegistryError",
    "RegistryState",
    "Result",
    "SignerSlot",
    "SignerSlots",
    "SignerSlotsUpdated",
    "SlotAssignmentFile",
    "SlotRegistry",
    "allow_only",
]
