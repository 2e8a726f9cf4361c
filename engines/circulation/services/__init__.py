"""
LibCirc Circulation Engine: Services
=======================================
Checkout and return as compound transactions over the Catalog and
Members engines.

Checkout pipeline (first refusal wins, state unchanged from there):
    1. members.check_eligibility
    2. catalog.check_availability
    3. catalog.take_copy + members.add_loan

Return pipeline (never refused):
    1. catalog.put_copy
    2. members.close_loan
    3. members.add_fine when late

Return does not verify that a matching loan exists. close_loan floors
at zero, so returning without a loan only restocks the shelf.
"""

from __future__ import annotations

import logging

from core.commands import codes
from core.commands.outcomes import ActionResult
from core.config.rules import DEFAULT_CONFIG, CirculationConfig
from core.state.exceptions import InvalidAmountError
from core.state.snapshot import LibraryState
from engines.catalog.services import check_availability, put_copy, take_copy
from engines.members.services import (
    add_fine,
    add_loan,
    check_eligibility,
    close_loan,
)

logger = logging.getLogger("libcirc.circulation")


# ══════════════════════════════════════════════════════════════
# CHECKOUT
# ══════════════════════════════════════════════════════════════

def checkout(
    state: LibraryState,
    member_class: int,
    title_id: int,
    config: CirculationConfig = DEFAULT_CONFIG,
) -> ActionResult:
    eligibility = check_eligibility(state, member_class, config)
    if not eligibility.ok:
        logger.info(
            f"Checkout member_class={member_class} title={title_id} "
            f"REJECTED: {eligibility.describe()} (code {eligibility.code})"
        )
        return eligibility

    availability = check_availability(eligibility.state, title_id)
    if not availability.ok:
        logger.info(
            f"Checkout member_class={member_class} title={title_id} "
            f"REJECTED: {availability.describe()} (code {availability.code})"
        )
        return availability

    after_take = take_copy(availability.state, title_id)
    logger.debug(f"Copy of title {title_id} taken from shelf")
    next_state = add_loan(after_take, member_class)

    logger.info(
        f"Checkout member_class={member_class} title={title_id} ACCEPTED"
    )
    return ActionResult.success(next_state)


# ══════════════════════════════════════════════════════════════
# RETURN
# ══════════════════════════════════════════════════════════════

def return_title(
    state: LibraryState,
    member_class: int,
    title_id: int,
    late_days: int = 0,
    config: CirculationConfig = DEFAULT_CONFIG,
) -> ActionResult:
    """
    Restock a copy and close a loan, fining late returns.

    The code is 1000 + late_days, so an on-time return reports 1000.
    """
    if late_days < 0:
        raise InvalidAmountError("late_days", late_days)

    after_put = put_copy(state, title_id)
    after_close = close_loan(after_put, member_class)

    fine = config.late_fee(late_days)
    if fine > 0:
        final_state = add_fine(after_close, member_class, fine)
        logger.debug(
            f"Member class {member_class} fined {fine} for "
            f"{late_days} day(s) late"
        )
    else:
        final_state = after_close

    logger.info(
        f"Return member_class={member_class} title={title_id} "
        f"late_days={late_days} ACCEPTED"
    )
    return ActionResult.success(final_state, codes.returned(late_days))
