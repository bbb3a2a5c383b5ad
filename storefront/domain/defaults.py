"""
Canonical site configuration defaults and read-path normalization.

The same normalize_config() runs on every path that reads the configuration
document (server GET, server save response, client load and save), so the
"home layout is never empty" rule holds no matter where a document came from.
"""

from __future__ import annotations

from typing import Any

from storefront.domain.entities import LayoutSection, SiteConfig
from storefront.domain.sections import default_payload

DEFAULT_SECTION_ORDER: tuple[str, ...] = ("hero", "categories", "featured", "banner", "trust")

# Flat content fields accepted by a partial save (wire names)
CONTENT_FIELDS: tuple[str, ...] = (
    "heroImage",
    "heroVideo",
    "heroTagline",
    "heroTitle",
    "heroSubtitle",
    "categoryTitle",
    "featuredTitle",
    "featuredSubtitle",
    "promoTitle",
    "promoText",
    "promoImage",
    "promoButtonText",
    "promoButtonLink",
    "aboutTitle",
    "aboutContent",
    "contactEmail",
    "contactPhone",
    "contactAddress",
    "socialInstagram",
    "socialFacebook",
    "socialWhatsapp",
    "trustBadge1Title",
    "trustBadge1Text",
    "trustBadge2Title",
    "trustBadge2Text",
    "trustBadge3Title",
    "trustBadge3Text",
    "announcementEnabled",
    "announcementText",
    "announcementLink",
    "announcementBgColor",
    "announcementTextColor",
)

# Top-level keys a partial save may carry
MERGEABLE_KEYS: frozenset[str] = frozenset(
    {
        "homeLayout",
        "themeColors",
        "footerColors",
        "logo",
        "siteName",
        "navbarLayout",
        "borderRadius",
        "fontSans",
        "fontSerif",
        "currency",
        *CONTENT_FIELDS,
    }
)


def default_home_layout() -> list[LayoutSection]:
    """The default ordered section list: ids "1".."5", all visible."""
    return [
        LayoutSection(id=str(position), type=section_type, is_visible=True, data=default_payload(section_type))
        for position, section_type in enumerate(DEFAULT_SECTION_ORDER, start=1)
    ]


def get_default_config() -> SiteConfig:
    """
    Canonical default document.

    Used when no configuration has been persisted yet.
    """
    return SiteConfig(
        home_layout=default_home_layout(),
        hero_image="https://images.unsplash.com/photo-1490481651871-ab68de25d43d?auto=format&fit=crop&q=80&w=2000",
        hero_tagline="New Collection",
        hero_title="Elegance in Every Stitch",
        hero_subtitle="Discover our latest arrivals designed for the modern woman.",
        category_title="Shop by Category",
        featured_title="New Arrivals",
        featured_subtitle="Fresh styles just added to our collection.",
        promo_title="Summer Sale is Live",
        promo_text="Get up to 50% off on selected dresses and kurtis. Limited time offer.",
        promo_image="https://images.unsplash.com/photo-1515886657613-9f3515b0c78f?auto=format&fit=crop&q=80&w=1000",
        promo_button_text="Explore Sale",
        promo_button_link="/shop",
        about_title="Our Story",
        about_content=(
            "LUMIÈRE was born from a desire to blend traditional craftsmanship "
            "with contemporary silhouettes."
        ),
        contact_email="support@lumiere.com",
        contact_phone="+1 (555) 123-4567",
        contact_address="123 Fashion Ave, New York, NY",
        currency="$",
    )


def _is_section(entry: Any) -> bool:
    if isinstance(entry, LayoutSection):
        return True
    return (
        isinstance(entry, dict)
        and isinstance(entry.get("id"), str)
        and isinstance(entry.get("type"), str)
    )


def normalize_config(raw: SiteConfig | dict[str, Any]) -> SiteConfig:
    """
    Resolve a stored or received document into a SiteConfig.

    A homeLayout that is absent, not a list, or empty is replaced by the
    default section list. Everything else is validated as-is.

    Raises:
        TypeError: If `raw` is not a document object.
    """
    if isinstance(raw, SiteConfig):
        doc = raw.model_dump(by_alias=True)
    elif isinstance(raw, dict):
        doc = dict(raw)
    else:
        raise TypeError(f"Configuration document must be an object, got {type(raw).__name__}")

    layout = doc.get("homeLayout", doc.get("home_layout"))
    doc.pop("home_layout", None)
    if isinstance(layout, list):
        layout = [s for s in layout if _is_section(s)]
    if not isinstance(layout, list) or not layout:
        doc["homeLayout"] = [s.model_dump(by_alias=True) for s in default_home_layout()]
    else:
        doc["homeLayout"] = layout

    # Nested token objects may be stored as {} or null by older writers
    for key in ("themeColors", "footerColors"):
        if not isinstance(doc.get(key), dict):
            doc.pop(key, None)

    return SiteConfig.model_validate(doc)
