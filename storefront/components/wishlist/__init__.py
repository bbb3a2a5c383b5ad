"""
Wishlist component - optimistic like synchronization.
"""

from ._impl import WISHLIST_KEY, WishlistSync

__all__ = ["WISHLIST_KEY", "WishlistSync"]
