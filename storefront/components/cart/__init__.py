"""
Cart component - local shopping cart.
"""

from ._impl import CartEngine

__all__ = ["CartEngine"]
