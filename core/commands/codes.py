"""
LibCirc Command Layer: Outcome Codes
=======================================
Every action reports one integer code. The code space is partitioned
so a code alone tells a caller what happened and to whom.

    0             success
    200 + title   title unavailable (no copies on the shelf)
    300 + class   member class at its loan limit
    400 + class   member class above its fine ceiling
    1000 + days   return completed, days late

Ids are bounded to 1..99 by core.config, so ranges never overlap.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


# ══════════════════════════════════════════════════════════════
# CODE CONSTANTS
# ══════════════════════════════════════════════════════════════

SUCCESS = 0
TITLE_UNAVAILABLE_BASE = 200
LOAN_LIMIT_BASE = 300
FINE_CEILING_BASE = 400
RETURN_BASE = 1000

_RANGE_WIDTH = 100


class OutcomeKind(Enum):
    """What an outcome code means."""
    SUCCESS = "SUCCESS"
    TITLE_UNAVAILABLE = "TITLE_UNAVAILABLE"
    LOAN_LIMIT_EXCEEDED = "LOAN_LIMIT_EXCEEDED"
    FINE_CEILING_EXCEEDED = "FINE_CEILING_EXCEEDED"
    RETURNED = "RETURNED"
    UNKNOWN = "UNKNOWN"


# ══════════════════════════════════════════════════════════════
# BUILDERS
# ══════════════════════════════════════════════════════════════

def title_unavailable(title_id: int) -> int:
    return TITLE_UNAVAILABLE_BASE + title_id


def loan_limit_exceeded(member_class: int) -> int:
    return LOAN_LIMIT_BASE + member_class


def fine_ceiling_exceeded(member_class: int) -> int:
    return FINE_CEILING_BASE + member_class


def returned(late_days: int) -> int:
    return RETURN_BASE + late_days


# ══════════════════════════════════════════════════════════════
# DECODING
# ══════════════════════════════════════════════════════════════

_RANGES = (
    (TITLE_UNAVAILABLE_BASE, OutcomeKind.TITLE_UNAVAILABLE),
    (LOAN_LIMIT_BASE, OutcomeKind.LOAN_LIMIT_EXCEEDED),
    (FINE_CEILING_BASE, OutcomeKind.FINE_CEILING_EXCEEDED),
)


def classify(code: int) -> Tuple[OutcomeKind, Optional[int]]:
    """
    Split a code into its kind and subject.

    The subject is the title id, member class or late-day count the
    code encodes; None for SUCCESS and UNKNOWN.
    """
    if code == SUCCESS:
        return OutcomeKind.SUCCESS, None
    if code >= RETURN_BASE:
        return OutcomeKind.RETURNED, code - RETURN_BASE
    for base, kind in _RANGES:
        if base < code < base + _RANGE_WIDTH:
            return kind, code - base
    return OutcomeKind.UNKNOWN, None


_DESCRIPTIONS = {
    OutcomeKind.TITLE_UNAVAILABLE: "title {} unavailable",
    OutcomeKind.LOAN_LIMIT_EXCEEDED: "member class {} at loan limit",
    OutcomeKind.FINE_CEILING_EXCEEDED: "member class {} over fine ceiling",
    OutcomeKind.RETURNED: "returned {} day(s) late",
}


def describe(code: int) -> str:
    """Human-readable text for a code, e.g. 'title 3 unavailable'."""
    kind, subject = classify(code)
    if kind == OutcomeKind.SUCCESS:
        return "ok"
    if kind == OutcomeKind.UNKNOWN:
        return f"unknown code {code}"
    return _DESCRIPTIONS[kind].format(subject)
