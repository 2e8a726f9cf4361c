"""
LibCirc Catalog Engine
=========================
Per-title copy availability.
"""

from engines.catalog.services import (
    advance_day,
    advance_days,
    check_availability,
    put_copy,
    seed,
    take_copy,
)

__all__ = [
    "seed",
    "advance_day",
    "advance_days",
    "check_availability",
    "take_copy",
    "put_copy",
]
