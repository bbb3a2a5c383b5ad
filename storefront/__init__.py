"""Lumiere storefront core: configuration, layout, theme, cart, wishlist and orders."""

__version__ = "0.1.0"
