"""
Section payload registry.

Every LayoutSection.type maps to one payload model. The model supplies the
type's default payload (used when a section is created) and its edit schema
(the keys an editor may change). Payloads travel as camelCase dicts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from storefront.domain.errors import SectionFieldError, UnknownSectionTypeError

SectionType = Literal[
    "hero",
    "categories",
    "featured",
    "banner",
    "trust",
    "text_image",
    "video",
    "testimonials",
    "spacer",
    "slider",
    "promo",
]


class SectionPayload(BaseModel):
    # Unknown keys from older documents are carried through untouched
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class HeroPayload(SectionPayload):
    image: str = "https://images.unsplash.com/photo-1490481651871-ab68de25d43d?auto=format&fit=crop&q=80&w=2000"
    video: str = ""
    tagline: str = "New Collection"
    title: str = "Elegance in Every Stitch"
    subtitle: str = "Discover our latest arrivals designed for the modern woman."


class CategoriesPayload(SectionPayload):
    title: str = "Shop by Category"


class FeaturedPayload(SectionPayload):
    title: str = "New Arrivals"
    subtitle: str = "Fresh styles just added to our collection."


class BannerPayload(SectionPayload):
    title: str = "Summer Sale is Live"
    text: str = "Get up to 50% off on selected dresses and kurtis. Limited time offer."
    button_text: str = "Explore Sale"
    button_link: str = "/shop"
    image: str = "https://images.unsplash.com/photo-1515886657613-9f3515b0c78f?auto=format&fit=crop&q=80&w=1000"


class TrustPayload(SectionPayload):
    badge1_title: str = "Premium Quality"
    badge1_text: str = "Hand-picked fabrics"
    badge2_title: str = "Secure Payment"
    badge2_text: str = "100% secure"
    badge3_title: str = "Fast Delivery"
    badge3_text: str = "Ships in 3 days"


class TextImagePayload(SectionPayload):
    title: str = "Our Craft"
    content: str = ""
    image: str = ""
    image_position: Literal["left", "right"] = "left"
    button_text: str = ""


class VideoPayload(SectionPayload):
    title: str = "Watch the Collection"
    description: str = ""
    video_url: str = ""


class TestimonialsPayload(SectionPayload):
    title: str = "What Our Customers Say"
    review1_text: str = "Amazing quality!"
    review1_author: str = "Happy Customer"
    review2_text: str = "Fast delivery."
    review2_author: str = "Verified Buyer"


class SpacerPayload(SectionPayload):
    height: int = Field(default=64, ge=0, le=400)
    show_line: bool = False


class SliderPayload(SectionPayload):
    title: str = "New Slideshow"
    images: list[str] = Field(default_factory=list)
    text_color: str = "#2C251F"
    text_align: Literal["left", "center", "right"] = "center"
    font_size: Literal["sm", "md", "lg"] = "md"


class PromoPayload(SectionPayload):
    title: str = "Limited Offer"
    text: str = ""
    image: str = ""
    button_text: str = "Shop Now"
    button_link: str = "/shop"


SECTION_PAYLOADS: dict[str, type[SectionPayload]] = {
    "hero": HeroPayload,
    "categories": CategoriesPayload,
    "featured": FeaturedPayload,
    "banner": BannerPayload,
    "trust": TrustPayload,
    "text_image": TextImagePayload,
    "video": VideoPayload,
    "testimonials": TestimonialsPayload,
    "spacer": SpacerPayload,
    "slider": SliderPayload,
    "promo": PromoPayload,
}


@dataclass(frozen=True)
class FieldSpec:
    """One editable payload field."""

    key: str
    kind: str
    default: Any


def register_section_type(section_type: str, payload: type[SectionPayload]) -> None:
    """Register (or replace) the payload model for a section type."""
    SECTION_PAYLOADS[section_type] = payload


def payload_model(section_type: str) -> type[SectionPayload]:
    model = SECTION_PAYLOADS.get(section_type)
    if model is None:
        raise UnknownSectionTypeError(f"Section type '{section_type}' is not registered.")
    return model


def default_payload(section_type: str) -> dict[str, Any]:
    """Fresh default payload for a section type, keyed by wire names."""
    return payload_model(section_type)().model_dump(by_alias=True)


def _kind(annotation: Any) -> str:
    if annotation is bool:
        return "bool"
    if annotation is int:
        return "int"
    if annotation is str:
        return "text"
    origin = getattr(annotation, "__origin__", None)
    if origin is list:
        return "list"
    if origin is Literal:
        return "choice"
    return "text"


def edit_schema(section_type: str) -> list[FieldSpec]:
    """Editable fields of a section type, in declaration order."""
    model = payload_model(section_type)
    specs: list[FieldSpec] = []
    for name, info in model.model_fields.items():
        default = info.get_default(call_default_factory=True)
        specs.append(FieldSpec(key=info.alias or name, kind=_kind(info.annotation), default=default))
    return specs


def resolve_field_key(section_type: str, key: str) -> str:
    """
    Map an editor key (wire name or attribute name) to its wire name.

    Raises:
        SectionFieldError: If the key is not part of the type's schema.
    """
    model = payload_model(section_type)
    for name, info in model.model_fields.items():
        alias = info.alias or name
        if key in (alias, name):
            return alias
    raise SectionFieldError(f"Field '{key}' is not editable on '{section_type}' sections.")


def merge_payload(section_type: str, data: dict[str, Any], key: str, value: Any) -> dict[str, Any]:
    """
    Merge one key into a payload and validate the result against the type's model.

    Returns the merged payload with any missing fields filled from defaults.

    Raises:
        SectionFieldError: If the key is unknown or the value fails validation.
    """
    wire_key = resolve_field_key(section_type, key)
    merged = {**data, wire_key: value}
    try:
        payload = payload_model(section_type).model_validate(merged)
    except ValidationError as e:
        msg = f"Invalid value for '{wire_key}' on '{section_type}' section: {e.errors()[0]['msg']}"
        raise SectionFieldError(msg) from e
    return payload.model_dump(by_alias=True)


def complete_payload(section_type: str, data: dict[str, Any]) -> dict[str, Any]:
    """
    Fill missing fields of a stored payload from the type's defaults.

    Unregistered types and payloads that fail validation are returned as-is,
    so a document written by a newer editor still renders.
    """
    model = SECTION_PAYLOADS.get(section_type)
    if model is None:
        return dict(data)
    try:
        return model.model_validate(data).model_dump(by_alias=True)
    except ValidationError:
        return {**default_payload(section_type), **data}
