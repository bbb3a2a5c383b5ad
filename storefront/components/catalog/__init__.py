"""
Catalog component - cached products and categories.
"""

from ._impl import CatalogCache

__all__ = ["CatalogCache"]
