"""
LibCirc State: Public API
============================
Immutable library snapshot and engine-internal errors.
"""

from core.state.exceptions import (
    CopyUnderflowError,
    InvalidAmountError,
    LibraryEngineError,
    UnknownMemberClassError,
    UnknownTitleError,
)
from core.state.snapshot import LibraryState

__all__ = [
    "LibraryState",
    "LibraryEngineError",
    "UnknownTitleError",
    "UnknownMemberClassError",
    "CopyUnderflowError",
    "InvalidAmountError",
]
