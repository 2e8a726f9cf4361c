"""
LibCirc Catalog Engine: Services
===================================
Per-title shelf stock. Seeds the library and moves copies on and
off the shelf.

RULES (NON-NEGOTIABLE):
- All functions are pure: snapshot in, snapshot (or result) out
- Shelf counts never go negative
- Availability refusal code is 200 + title_id
"""

from __future__ import annotations

from core.commands import codes
from core.commands.outcomes import ActionResult
from core.config.rules import DEFAULT_CONFIG, CirculationConfig
from core.state.exceptions import CopyUnderflowError
from core.state.snapshot import LibraryState


def seed(config: CirculationConfig = DEFAULT_CONFIG) -> LibraryState:
    """Opening-day snapshot: full shelves, no loans, no fines."""
    return LibraryState(
        day=1,
        available_copies={t.title_id: t.initial_copies for t in config.titles},
        active_loans={m.member_class: 0 for m in config.member_classes},
        outstanding_fines={m.member_class: 0 for m in config.member_classes},
    )


def advance_day(state: LibraryState) -> LibraryState:
    return state.next_day()


def advance_days(state: LibraryState, days: int) -> LibraryState:
    if days < 0:
        raise ValueError(f"days cannot be negative, got {days}.")
    for _ in range(days):
        state = advance_day(state)
    return state


def check_availability(state: LibraryState, title_id: int) -> ActionResult:
    if state.copies_of(title_id) > 0:
        return ActionResult.success(state)
    return ActionResult.failure(state, codes.title_unavailable(title_id))


def take_copy(state: LibraryState, title_id: int) -> LibraryState:
    """
    Remove one copy from the shelf.

    Callers must check availability first; an empty shelf raises
    CopyUnderflowError instead of going negative.
    """
    count = state.copies_of(title_id)
    if count <= 0:
        raise CopyUnderflowError(title_id)
    return state.with_available_copies(title_id, count - 1)


def put_copy(state: LibraryState, title_id: int) -> LibraryState:
    return state.with_available_copies(title_id, state.copies_of(title_id) + 1)
