"""
Tests for the canonical configuration document and read-path normalization.
"""

import pytest
from pydantic import ValidationError

from storefront.domain.defaults import (
    DEFAULT_SECTION_ORDER,
    MERGEABLE_KEYS,
    default_home_layout,
    get_default_config,
    normalize_config,
)
from storefront.domain.entities import SiteConfig


class TestDefaultLayout:
    def test_five_sections_in_order(self) -> None:
        layout = default_home_layout()
        assert [s.type for s in layout] == ["hero", "categories", "featured", "banner", "trust"]
        assert [s.id for s in layout] == ["1", "2", "3", "4", "5"]
        assert all(s.is_visible for s in layout)

    def test_sections_carry_default_payloads(self) -> None:
        hero = default_home_layout()[0]
        assert hero.data["tagline"] == "New Collection"
        assert hero.data["title"] == "Elegance in Every Stitch"

    def test_each_call_returns_fresh_copies(self) -> None:
        first = default_home_layout()
        first[0].data["title"] = "Changed"
        assert default_home_layout()[0].data["title"] == "Elegance in Every Stitch"

    def test_default_config_has_layout(self) -> None:
        config = get_default_config()
        assert [s.type for s in config.home_layout] == list(DEFAULT_SECTION_ORDER)
        assert config.theme_colors.primary == "#2C251F"
        assert config.footer_colors.text == "#F5F5F5"
        assert config.contact_email == "support@lumiere.com"


class TestNormalizeConfig:
    @pytest.mark.parametrize(
        "layout",
        [None, [], "not-a-list", 42, {"id": "1"}, [{"no": "id"}], ["junk", 3]],
    )
    def test_malformed_layout_replaced_by_default(self, layout) -> None:
        doc = {"siteName": "Shop"}
        if layout is not None:
            doc["homeLayout"] = layout
        config = normalize_config(doc)
        assert [s.type for s in config.home_layout] == list(DEFAULT_SECTION_ORDER)
        assert config.site_name == "Shop"

    def test_valid_layout_kept(self) -> None:
        doc = {"homeLayout": [{"id": "x", "type": "spacer", "isVisible": False, "data": {"height": 10}}]}
        config = normalize_config(doc)
        assert len(config.home_layout) == 1
        assert config.home_layout[0].id == "x"
        assert config.home_layout[0].is_visible is False

    def test_malformed_entries_dropped_from_mixed_layout(self) -> None:
        doc = {"homeLayout": [{"id": "a", "type": "hero"}, "junk", {"type": "banner"}]}
        config = normalize_config(doc)
        assert [s.id for s in config.home_layout] == ["a"]

    def test_accepts_site_config_instance(self) -> None:
        config = normalize_config(SiteConfig(site_name="Shop"))
        assert config.site_name == "Shop"
        assert len(config.home_layout) == 5

    def test_null_theme_tokens_use_defaults(self) -> None:
        config = normalize_config({"themeColors": None, "footerColors": "bad"})
        assert config.theme_colors.background == "#F9F8F6"
        assert config.footer_colors.background == "#2C251F"

    def test_partial_theme_tokens_filled(self) -> None:
        config = normalize_config({"themeColors": {"primary": "#000000"}})
        assert config.theme_colors.primary == "#000000"
        assert config.theme_colors.surface == "#FFFFFF"

    def test_invalid_field_raises(self) -> None:
        with pytest.raises(ValidationError):
            normalize_config({"navbarLayout": "diagonal"})

    @pytest.mark.parametrize("raw", [[], None, "config", 3])
    def test_non_object_document_raises(self, raw) -> None:
        with pytest.raises(TypeError):
            normalize_config(raw)

    def test_normalization_is_stable(self) -> None:
        once = normalize_config({})
        twice = normalize_config(once)
        assert once == twice


def test_mergeable_keys_cover_layout_and_tokens() -> None:
    for key in ("homeLayout", "themeColors", "footerColors", "logo", "heroTitle", "trustBadge3Text"):
        assert key in MERGEABLE_KEYS
    assert "id" not in MERGEABLE_KEYS
