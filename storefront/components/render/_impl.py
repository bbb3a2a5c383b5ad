"""
Home page and shop listing view models.

Builds plain view models from the configuration document and the catalog;
no markup is produced here.

Key behaviors:
- sections are emitted strictly in layout order, invisible ones skipped
- each text field falls back from the section payload to the flat content
  field of the document, then to a fixed literal
- unknown section types are skipped
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from storefront.domain.entities import Category, LayoutSection, Product, SiteConfig
from storefront.domain.sections import SECTION_PAYLOADS, complete_payload

FEATURED_LIMIT = 4

ShopSort = Literal["newest", "price-low", "price-high"]


@dataclass
class RenderedSection:
    """One visible home page block."""

    id: str
    type: str
    fields: dict[str, Any] = field(default_factory=dict)
    products: list[Product] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)


def _pick(data: dict[str, Any], key: str, config: SiteConfig, flat: str | None = None, default: Any = "") -> Any:
    value = data.get(key)
    if value:
        return value
    if flat is not None:
        flat_value = getattr(config, flat, None)
        if flat_value:
            return flat_value
    return default


# Payload key -> (flat SiteConfig attribute, literal default)
_FALLBACKS: dict[str, dict[str, tuple[str | None, Any]]] = {
    "hero": {
        "image": ("hero_image", ""),
        "video": ("hero_video", ""),
        "tagline": ("hero_tagline", "New Collection"),
        "title": ("hero_title", ""),
        "subtitle": ("hero_subtitle", ""),
    },
    "categories": {
        "title": ("category_title", "Shop by Category"),
    },
    "featured": {
        "title": ("featured_title", "New Arrivals"),
        "subtitle": ("featured_subtitle", "Fresh styles just added to our collection."),
    },
    "banner": {
        "title": ("promo_title", ""),
        "text": ("promo_text", ""),
        "buttonText": ("promo_button_text", ""),
        "buttonLink": ("promo_button_link", "/shop"),
        "image": ("promo_image", ""),
    },
    "trust": {
        "badge1Title": ("trust_badge1_title", ""),
        "badge1Text": ("trust_badge1_text", ""),
        "badge2Title": ("trust_badge2_title", ""),
        "badge2Text": ("trust_badge2_text", ""),
        "badge3Title": ("trust_badge3_title", ""),
        "badge3Text": ("trust_badge3_text", ""),
    },
}


def render_section(
    section: LayoutSection,
    config: SiteConfig,
    products: list[Product],
    categories: list[Category],
) -> RenderedSection | None:
    """View model for one section, or None if it is hidden or of an unknown type."""
    if not section.is_visible or section.type not in SECTION_PAYLOADS:
        return None

    data = complete_payload(section.type, section.data)
    fallbacks = _FALLBACKS.get(section.type)
    if fallbacks is None:
        fields = data
    else:
        fields = {**data}
        for key, (flat, default) in fallbacks.items():
            fields[key] = _pick(section.data, key, config, flat, default)

    rendered = RenderedSection(id=section.id, type=section.type, fields=fields)
    if section.type == "categories":
        rendered.categories = list(categories)
    elif section.type == "featured":
        rendered.products = [p for p in products if p.new_arrival][:FEATURED_LIMIT]
    return rendered


def render_home(
    config: SiteConfig,
    products: list[Product] | None = None,
    categories: list[Category] | None = None,
) -> list[RenderedSection]:
    """Visible home page sections in layout order."""
    rendered: list[RenderedSection] = []
    for section in config.home_layout:
        view = render_section(section, config, products or [], categories or [])
        if view is not None:
            rendered.append(view)
    return rendered


def shop_listing(products: list[Product], category: str = "All", sort_by: ShopSort = "newest") -> list[Product]:
    """Products for the shop page, filtered by category name and sorted by effective price."""
    listed = [p for p in products if category == "All" or p.category == category]
    if sort_by == "price-low":
        listed.sort(key=lambda p: p.effective_price)
    elif sort_by == "price-high":
        listed.sort(key=lambda p: p.effective_price, reverse=True)
    return listed
