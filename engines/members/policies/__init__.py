"""
LibCirc Members Engine: Policies
===================================
Borrowing eligibility rules. Each policy returns a refusal code,
or None when the member class passes.

Order matters: ELIGIBILITY_POLICIES is evaluated front to back and the
first refusal wins.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from core.commands import codes
from core.config.rules import MemberClassRule
from core.state.snapshot import LibraryState


def loan_limit_policy(
    state: LibraryState,
    rule: MemberClassRule,
) -> Optional[int]:
    """Refuse when open loans have reached the class limit."""
    if state.loans_of(rule.member_class) >= rule.loan_limit:
        return codes.loan_limit_exceeded(rule.member_class)
    return None


def fine_ceiling_policy(
    state: LibraryState,
    rule: MemberClassRule,
) -> Optional[int]:
    """Refuse when unpaid fines are strictly above the ceiling."""
    if state.fines_of(rule.member_class) > rule.fine_ceiling:
        return codes.fine_ceiling_exceeded(rule.member_class)
    return None


EligibilityPolicy = Callable[[LibraryState, MemberClassRule], Optional[int]]

ELIGIBILITY_POLICIES: Tuple[EligibilityPolicy, ...] = (
    loan_limit_policy,
    fine_ceiling_policy,
)
