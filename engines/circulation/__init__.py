"""
LibCirc Circulation Engine
=============================
Checkout and return transactions.
"""

from engines.circulation.services import checkout, return_title

__all__ = [
    "checkout",
    "return_title",
]
