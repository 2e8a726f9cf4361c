"""
LibCirc State: Library Snapshot
==================================
The sole piece of domain state. One immutable value describes the
whole library at one instant.

RULES (NON-NEGOTIABLE):
- Snapshots are never mutated; every transition returns a new one
- All counts are non-negative integers (minor currency units for fines)
- Mapping fields are read-only copies of whatever the caller passed in
- Derivation helpers only replace values for ids already present

This file contains NO circulation rules. See engines.* for those.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Mapping

from core.state.exceptions import UnknownMemberClassError, UnknownTitleError


def _freeze_counts(name: str, counts: Mapping[int, int]) -> Mapping[int, int]:
    frozen = {}
    for key, value in dict(counts).items():
        if not isinstance(key, int) or isinstance(key, bool):
            raise ValueError(f"{name} keys must be integers, got {key!r}.")
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{name}[{key}] must be an integer, got {value!r}.")
        if value < 0:
            raise ValueError(f"{name}[{key}] cannot be negative, got {value}.")
        frozen[key] = value
    return MappingProxyType(frozen)


# ══════════════════════════════════════════════════════════════
# LIBRARY STATE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True, repr=False)
class LibraryState:
    """
    Immutable snapshot of the whole circulation system.

    Fields:
        day:               Current day, advanced only by advance_day.
        available_copies:  title_id -> copies on the shelf.
        active_loans:      member_class -> open loans.
        outstanding_fines: member_class -> unpaid fines (minor units).
    """

    day: int
    available_copies: Mapping[int, int]
    active_loans: Mapping[int, int]
    outstanding_fines: Mapping[int, int]

    def __post_init__(self):
        if not isinstance(self.day, int) or isinstance(self.day, bool):
            raise ValueError(f"day must be an integer, got {self.day!r}.")
        if self.day < 0:
            raise ValueError(f"day cannot be negative, got {self.day}.")

        object.__setattr__(
            self, "available_copies",
            _freeze_counts("available_copies", self.available_copies),
        )
        object.__setattr__(
            self, "active_loans",
            _freeze_counts("active_loans", self.active_loans),
        )
        object.__setattr__(
            self, "outstanding_fines",
            _freeze_counts("outstanding_fines", self.outstanding_fines),
        )

        if set(self.active_loans) != set(self.outstanding_fines):
            raise ValueError(
                "active_loans and outstanding_fines must cover the same "
                "member classes."
            )

    def __hash__(self) -> int:
        return hash((
            self.day,
            tuple(sorted(self.available_copies.items())),
            tuple(sorted(self.active_loans.items())),
            tuple(sorted(self.outstanding_fines.items())),
        ))

    def __repr__(self) -> str:
        return (
            f"LibraryState(day={self.day}, "
            f"available_copies={dict(self.available_copies)}, "
            f"active_loans={dict(self.active_loans)}, "
            f"outstanding_fines={dict(self.outstanding_fines)})"
        )

    # ── Reads ─────────────────────────────────────────────────

    def copies_of(self, title_id: int) -> int:
        try:
            return self.available_copies[title_id]
        except KeyError:
            raise UnknownTitleError(title_id) from None

    def loans_of(self, member_class: int) -> int:
        try:
            return self.active_loans[member_class]
        except KeyError:
            raise UnknownMemberClassError(member_class) from None

    def fines_of(self, member_class: int) -> int:
        try:
            return self.outstanding_fines[member_class]
        except KeyError:
            raise UnknownMemberClassError(member_class) from None

    # ── Derivations ───────────────────────────────────────────

    def next_day(self) -> LibraryState:
        return replace(self, day=self.day + 1)

    def with_available_copies(self, title_id: int, count: int) -> LibraryState:
        self.copies_of(title_id)
        copies = dict(self.available_copies)
        copies[title_id] = count
        return replace(self, available_copies=copies)

    def with_active_loans(self, member_class: int, count: int) -> LibraryState:
        self.loans_of(member_class)
        loans = dict(self.active_loans)
        loans[member_class] = count
        return replace(self, active_loans=loans)

    def with_outstanding_fines(self, member_class: int, amount: int) -> LibraryState:
        self.fines_of(member_class)
        fines = dict(self.outstanding_fines)
        fines[member_class] = amount
        return replace(self, outstanding_fines=fines)

    # ── Serialization ─────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "available_copies": dict(self.available_copies),
            "active_loans": dict(self.active_loans),
            "outstanding_fines": dict(self.outstanding_fines),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LibraryState:
        return cls(
            day=data["day"],
            available_copies={int(k): v for k, v in data["available_copies"].items()},
            active_loans={int(k): v for k, v in data["active_loans"].items()},
            outstanding_fines={int(k): v for k, v in data["outstanding_fines"].items()},
        )
