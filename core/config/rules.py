"""
LibCirc Core Config: Circulation Rules
=========================================
Doctrine: No hardcoded titles, loan limits or fees in engine logic.
Starting stock, per-class limits and the late fee come from
configuration data passed into the engines, not from source code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple

from core.state.exceptions import UnknownMemberClassError, UnknownTitleError


# Outcome codes are built as BASE + id (see core.commands.codes); ids above
# this bound would spill into the next code range.
MIN_ENTITY_ID = 1
MAX_ENTITY_ID = 99


def _check_entity_id(name: str, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    if not MIN_ENTITY_ID <= value <= MAX_ENTITY_ID:
        raise ValueError(
            f"{name} must be between {MIN_ENTITY_ID} and {MAX_ENTITY_ID}, "
            f"got {value}."
        )


def _check_non_negative(name: str, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}.")


# ══════════════════════════════════════════════════════════════
# TITLE RULE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TitleRule:
    """
    Catalog entry with a finite pool of physical copies.

    label is used by reporting only (e.g. 'a' renders as 'available_a').
    """

    title_id: int
    label: str
    initial_copies: int

    def __post_init__(self) -> None:
        _check_entity_id("title_id", self.title_id)
        if not self.label or not isinstance(self.label, str):
            raise ValueError("label must be a non-empty string.")
        _check_non_negative("initial_copies", self.initial_copies)

    def to_dict(self) -> dict:
        return {
            "title_id": self.title_id,
            "label": self.label,
            "initial_copies": self.initial_copies,
        }

    @classmethod
    def from_dict(cls, data: dict) -> TitleRule:
        return cls(
            title_id=data["title_id"],
            label=data.get("label", str(data["title_id"])),
            initial_copies=data["initial_copies"],
        )


# ══════════════════════════════════════════════════════════════
# MEMBER CLASS RULE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class MemberClassRule:
    """
    Borrowing rules for one member class.

    A member is blocked when active loans reach loan_limit, or when
    outstanding fines rise strictly above fine_ceiling.
    """

    member_class: int
    loan_limit: int
    fine_ceiling: int

    def __post_init__(self) -> None:
        _check_entity_id("member_class", self.member_class)
        _check_non_negative("loan_limit", self.loan_limit)
        _check_non_negative("fine_ceiling", self.fine_ceiling)

    def to_dict(self) -> dict:
        return {
            "member_class": self.member_class,
            "loan_limit": self.loan_limit,
            "fine_ceiling": self.fine_ceiling,
        }

    @classmethod
    def from_dict(cls, data: dict) -> MemberClassRule:
        return cls(
            member_class=data["member_class"],
            loan_limit=data["loan_limit"],
            fine_ceiling=data["fine_ceiling"],
        )


# ══════════════════════════════════════════════════════════════
# CIRCULATION CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CirculationConfig:
    """
    Complete policy for one library.

    Fields:
        titles:           Catalog, in reporting order.
        member_classes:   Member roster, in reporting order.
        late_fee_per_day: Flat fine per day late (minor currency units).
    """

    titles: Tuple[TitleRule, ...]
    member_classes: Tuple[MemberClassRule, ...]
    late_fee_per_day: int = 75

    def __post_init__(self) -> None:
        object.__setattr__(self, "titles", tuple(self.titles))
        object.__setattr__(self, "member_classes", tuple(self.member_classes))

        if not self.titles:
            raise ValueError("At least one title must be configured.")
        if not self.member_classes:
            raise ValueError("At least one member class must be configured.")

        title_ids = [t.title_id for t in self.titles]
        if len(set(title_ids)) != len(title_ids):
            raise ValueError(f"Duplicate title_id in {title_ids}.")

        class_ids = [m.member_class for m in self.member_classes]
        if len(set(class_ids)) != len(class_ids):
            raise ValueError(f"Duplicate member_class in {class_ids}.")

        _check_non_negative("late_fee_per_day", self.late_fee_per_day)

    @property
    def title_ids(self) -> Tuple[int, ...]:
        return tuple(t.title_id for t in self.titles)

    @property
    def member_class_ids(self) -> Tuple[int, ...]:
        return tuple(m.member_class for m in self.member_classes)

    def title_rule(self, title_id: int) -> TitleRule:
        for rule in self.titles:
            if rule.title_id == title_id:
                return rule
        raise UnknownTitleError(title_id)

    def member_rule(self, member_class: int) -> MemberClassRule:
        for rule in self.member_classes:
            if rule.member_class == member_class:
                return rule
        raise UnknownMemberClassError(member_class)

    def late_fee(self, late_days: int) -> int:
        """Fine owed for a return late_days late (0 when on time)."""
        if late_days <= 0:
            return 0
        return late_days * self.late_fee_per_day

    def to_dict(self) -> dict:
        return {
            "late_fee_per_day": self.late_fee_per_day,
            "titles": [t.to_dict() for t in self.titles],
            "member_classes": [m.to_dict() for m in self.member_classes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> CirculationConfig:
        return cls(
            titles=tuple(TitleRule.from_dict(t) for t in data["titles"]),
            member_classes=tuple(
                MemberClassRule.from_dict(m) for m in data["member_classes"]
            ),
            late_fee_per_day=data.get("late_fee_per_day", 75),
        )


# Reference library: three titles, two member classes.
DEFAULT_CONFIG = CirculationConfig(
    titles=(
        TitleRule(title_id=1, label="a", initial_copies=3),
        TitleRule(title_id=2, label="b", initial_copies=2),
        TitleRule(title_id=3, label="c", initial_copies=1),
    ),
    member_classes=(
        MemberClassRule(member_class=1, loan_limit=3, fine_ceiling=2000),
        MemberClassRule(member_class=2, loan_limit=2, fine_ceiling=2000),
    ),
    late_fee_per_day=75,
)


# ══════════════════════════════════════════════════════════════
# CONFIG STORE PROTOCOL
# ══════════════════════════════════════════════════════════════

class ConfigStore(Protocol):
    """
    Protocol for named circulation config storage.

    Implementations may back this with a file or an in-memory store.
    """

    def get_config(self, name: str) -> Optional[CirculationConfig]:
        """Fetch a config by name."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IN-MEMORY CONFIG STORE (for testing / bootstrap)
# ══════════════════════════════════════════════════════════════

class InMemoryConfigStore:
    """Simple in-memory config store, pre-loaded with the default config."""

    DEFAULT_NAME = "default"

    def __init__(self) -> None:
        self._configs: Dict[str, CirculationConfig] = {
            self.DEFAULT_NAME: DEFAULT_CONFIG,
        }

    def add_config(self, name: str, config: CirculationConfig) -> None:
        if not name:
            raise ValueError("Config name must be non-empty.")
        self._configs[name] = config

    def get_config(self, name: str) -> Optional[CirculationConfig]:
        return self._configs.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._configs))
