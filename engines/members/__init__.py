"""
LibCirc Members Engine
=========================
Loan counts, fine balances and borrowing eligibility per member class.
"""

from engines.members.policies import (
    ELIGIBILITY_POLICIES,
    fine_ceiling_policy,
    loan_limit_policy,
)
from engines.members.services import (
    add_fine,
    add_loan,
    check_eligibility,
    close_loan,
    pay,
)

__all__ = [
    "check_eligibility",
    "add_loan",
    "close_loan",
    "add_fine",
    "pay",
    "loan_limit_policy",
    "fine_ceiling_policy",
    "ELIGIBILITY_POLICIES",
]
