"""
LibCirc Command Layer: Outcomes
==================================
Every refusable action produces exactly one ActionResult.
Refusals are first-class results with a diagnosable code.
"""

from core.commands import codes
from core.commands.codes import OutcomeKind, classify, describe
from core.commands.outcomes import ActionResult

__all__ = [
    "codes",
    "ActionResult",
    "OutcomeKind",
    "classify",
    "describe",
]
