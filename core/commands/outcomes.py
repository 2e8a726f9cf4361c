"""
LibCirc Command Layer: Action Result Contract
================================================
Every action that can be refused produces exactly one ActionResult.
Business failures are results, never exceptions.

Rules:
- Result is immutable (frozen dataclass)
- Result always carries the state the caller continues with
- A refused action carries the state unchanged from the point of failure
- code follows the partition in core.commands.codes
"""

from __future__ import annotations

from dataclasses import dataclass

from core.commands import codes
from core.state.snapshot import LibraryState


# ══════════════════════════════════════════════════════════════
# ACTION RESULT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ActionResult:
    """
    Snapshot plus outcome of one action.

    Fields:
        state: Snapshot the caller threads forward.
        ok:    True if the action took effect.
        code:  Outcome code (0 for plain success).
    """

    state: LibraryState
    ok: bool
    code: int

    def __post_init__(self):
        if not isinstance(self.state, LibraryState):
            raise ValueError(
                f"state must be LibraryState, got {type(self.state).__name__}."
            )
        if not isinstance(self.ok, bool):
            raise ValueError("ok must be a bool.")
        if not isinstance(self.code, int) or isinstance(self.code, bool):
            raise ValueError("code must be an integer.")
        if not self.ok and self.code == codes.SUCCESS:
            raise ValueError(
                "Failed result must carry a non-zero code. "
                "No silent rejections allowed."
            )

    @classmethod
    def success(cls, state: LibraryState, code: int = codes.SUCCESS) -> ActionResult:
        return cls(state=state, ok=True, code=code)

    @classmethod
    def failure(cls, state: LibraryState, code: int) -> ActionResult:
        return cls(state=state, ok=False, code=code)

    @property
    def kind(self) -> codes.OutcomeKind:
        return codes.classify(self.code)[0]

    def describe(self) -> str:
        return codes.describe(self.code)

    def to_dict(self) -> dict:
        kind, subject = codes.classify(self.code)
        return {
            "ok": self.ok,
            "code": self.code,
            "kind": kind.value,
            "subject": subject,
        }
