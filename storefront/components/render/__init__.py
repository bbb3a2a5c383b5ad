"""
Render component - home page and shop view models.
"""

from ._impl import FEATURED_LIMIT, RenderedSection, ShopSort, render_home, render_section, shop_listing

__all__ = [
    "FEATURED_LIMIT",
    "RenderedSection",
    "ShopSort",
    "render_home",
    "render_section",
    "shop_listing",
]
