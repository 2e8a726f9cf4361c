"""
LibCirc Members Engine: Services
===================================
Per-member-class loan counts and fine balances.

RULES (NON-NEGOTIABLE):
- All functions are pure: snapshot in, snapshot (or result) out
- Loan counts and fines never go negative (floors, not errors)
- Amounts are integers in minor currency units
- add_loan trusts its caller; limits are enforced by check_eligibility
"""

from __future__ import annotations

import logging

from core.commands.outcomes import ActionResult
from core.config.rules import DEFAULT_CONFIG, CirculationConfig
from core.state.exceptions import InvalidAmountError
from core.state.snapshot import LibraryState
from engines.members.policies import ELIGIBILITY_POLICIES

logger = logging.getLogger("libcirc.members")


def check_eligibility(
    state: LibraryState,
    member_class: int,
    config: CirculationConfig = DEFAULT_CONFIG,
) -> ActionResult:
    """
    Can this member class borrow one more title?

    Loan limit is checked before the fine ceiling. State passes
    through unchanged either way.
    """
    rule = config.member_rule(member_class)
    for policy in ELIGIBILITY_POLICIES:
        code = policy(state, rule)
        if code is not None:
            logger.debug(
                f"Member class {member_class} refused by {policy.__name__} "
                f"(code {code})"
            )
            return ActionResult.failure(state, code)
    return ActionResult.success(state)


def add_loan(state: LibraryState, member_class: int) -> LibraryState:
    return state.with_active_loans(member_class, state.loans_of(member_class) + 1)


def close_loan(state: LibraryState, member_class: int) -> LibraryState:
    """Close one loan. Closing with no open loans is a no-op."""
    loans = state.loans_of(member_class)
    if loans == 0:
        return state
    return state.with_active_loans(member_class, loans - 1)


def add_fine(
    state: LibraryState,
    member_class: int,
    amount_minor_units: int,
) -> LibraryState:
    if amount_minor_units < 0:
        raise InvalidAmountError("amount_minor_units", amount_minor_units)
    return state.with_outstanding_fines(
        member_class, state.fines_of(member_class) + amount_minor_units,
    )


def pay(
    state: LibraryState,
    member_class: int,
    payment_minor_units: int,
) -> LibraryState:
    """
    Apply a payment to the class's fine balance.

    Overpayment is absorbed: the balance floors at zero and no credit
    is carried.
    """
    if payment_minor_units < 0:
        raise InvalidAmountError("payment_minor_units", payment_minor_units)
    balance = state.fines_of(member_class)
    remaining = max(0, balance - payment_minor_units)
    if payment_minor_units > balance:
        logger.debug(
            f"Member class {member_class} overpaid by "
            f"{payment_minor_units - balance}; excess absorbed"
        )
    return state.with_outstanding_fines(member_class, remaining)
