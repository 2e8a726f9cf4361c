"""
Tests for engines.catalog: seed, day advance, shelf stock.
"""

import pytest

from core.config.rules import CirculationConfig, MemberClassRule, TitleRule
from core.state import CopyUnderflowError, UnknownTitleError
from engines.catalog import (
    advance_day,
    advance_days,
    check_availability,
    put_copy,
    seed,
    take_copy,
)


class TestSeed:
    def test_reference_seed(self):
        state = seed()
        assert state.day == 1
        assert dict(state.available_copies) == {1: 3, 2: 2, 3: 1}
        assert dict(state.active_loans) == {1: 0, 2: 0}
        assert dict(state.outstanding_fines) == {1: 0, 2: 0}

    def test_seed_follows_config(self):
        config = CirculationConfig(
            titles=tuple(
                TitleRule(title_id=i, label=f"t{i}", initial_copies=i * 10)
                for i in range(1, 6)
            ),
            member_classes=tuple(
                MemberClassRule(member_class=i, loan_limit=1, fine_ceiling=0)
                for i in range(1, 4)
            ),
        )
        state = seed(config)
        assert dict(state.available_copies) == {1: 10, 2: 20, 3: 30, 4: 40, 5: 50}
        assert dict(state.active_loans) == {1: 0, 2: 0, 3: 0}


class TestAdvanceDay:
    def test_increments_day_only(self):
        state = seed()
        nxt = advance_day(state)
        assert nxt.day == 2
        assert nxt.available_copies == state.available_copies
        assert nxt.active_loans == state.active_loans
        assert nxt.outstanding_fines == state.outstanding_fines
        assert state.day == 1

    @pytest.mark.parametrize("n", [0, 1, 4, 30])
    def test_monotonic_n_days(self, n):
        state = seed()
        for _ in range(n):
            state = advance_day(state)
        assert state.day == 1 + n
        assert state.to_dict()["available_copies"] == {1: 3, 2: 2, 3: 1}

    def test_advance_days(self):
        assert advance_days(seed(), 4).day == 5
        assert advance_days(seed(), 0) == seed()

    def test_advance_days_rejects_negative(self):
        with pytest.raises(ValueError, match="negative"):
            advance_days(seed(), -1)


class TestCheckAvailability:
    def test_available(self):
        state = seed()
        result = check_availability(state, 3)
        assert result.ok
        assert result.code == 0
        assert result.state is state

    def test_unavailable_code_encodes_title(self):
        state = seed().with_available_copies(3, 0)
        result = check_availability(state, 3)
        assert not result.ok
        assert result.code == 203
        assert result.state is state

    def test_unknown_title(self):
        with pytest.raises(UnknownTitleError):
            check_availability(seed(), 42)


class TestTakePutCopy:
    def test_take_decrements(self):
        state = take_copy(seed(), 1)
        assert state.copies_of(1) == 2
        assert state.copies_of(2) == 2

    def test_take_from_empty_shelf_raises(self):
        state = seed().with_available_copies(3, 0)
        with pytest.raises(CopyUnderflowError) as exc:
            take_copy(state, 3)
        assert exc.value.title_id == 3

    def test_put_increments_without_bound(self):
        state = seed()
        for _ in range(10):
            state = put_copy(state, 3)
        assert state.copies_of(3) == 11

    def test_take_then_put_restores(self):
        state = seed()
        assert put_copy(take_copy(state, 2), 2) == state
