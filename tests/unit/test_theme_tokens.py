import pytest

from storefront.adapters.render.css_context import CssVariableContext
from storefront.components.theme import ThemeApplier, adjust_brightness, derive_tokens, parse_hex
from storefront.domain.defaults import get_default_config
from storefront.domain.entities import SiteConfig, ThemeColors
from storefront.rules.models import ThemeRules


class TestAdjustBrightness:
    def test_positive_offset(self) -> None:
        assert adjust_brightness("#2C251F", 20) == "#403933"

    def test_negative_offset(self) -> None:
        assert adjust_brightness("#2C251F", -20) == "#18110b"

    @pytest.mark.parametrize("color", ["#000000", "#ffffff", "#2C251F", "#D5CDC0", "#0a0b0c"])
    def test_zero_offset_is_identity(self, color: str) -> None:
        assert adjust_brightness(color, 0) == color.lower()

    def test_clamps_high(self) -> None:
        assert adjust_brightness("#F0F0F0", 40) == "#ffffff"

    def test_clamps_low(self) -> None:
        assert adjust_brightness("#101010", -40) == "#000000"

    def test_channels_independent(self) -> None:
        assert adjust_brightness("#FF0080", 100) == "#ff64e4"

    @pytest.mark.parametrize("offset", [-300, -255, -1, 1, 255, 300])
    def test_channels_stay_in_range(self, offset: int) -> None:
        for channel in parse_hex(adjust_brightness("#7f3a00", offset)):
            assert 0 <= channel <= 255

    def test_short_hex(self) -> None:
        assert adjust_brightness("#fff", -15) == "#f0f0f0"

    def test_invalid_color(self) -> None:
        with pytest.raises(ValueError):
            adjust_brightness("tomato", 10)


class TestDeriveTokens:
    def test_base_and_variants(self) -> None:
        tokens = derive_tokens(get_default_config())
        assert tokens["--color-primary"] == "#2c251f"
        assert tokens["--color-primary-deep"] == "#18110b"
        assert tokens["--color-primary-light"] == "#403933"
        assert tokens["--color-footer-background"] == "#2c251f"
        assert tokens["--radius"] == "2px"
        assert tokens["--font-serif"] == "Cormorant Garamond"
        assert tokens["navbar-layout"] == "center"

    def test_brand_scale(self) -> None:
        tokens = derive_tokens(get_default_config())
        assert tokens["--color-brand-50"] == "#f9f8f6"
        assert tokens["--color-brand-100"] == "#ffffff"
        assert tokens["--color-brand-200"] == "#d5cdc0"
        assert tokens["--color-brand-300"] == "#e9e1d4"
        assert tokens["--color-brand-800"] == "#403933"
        assert tokens["--color-brand-900"] == "#2c251f"

    def test_invalid_color_falls_back(self) -> None:
        config = SiteConfig(theme_colors=ThemeColors(primary="not-a-color", surface=""))
        tokens = derive_tokens(config)
        assert tokens["--color-primary"] == "#2c251f"
        assert tokens["--color-surface"] == "#ffffff"

    @pytest.mark.parametrize("stored", ["2C251F", "#2C251F", " #2c251f "])
    def test_base_color_emitted_as_hash_hex(self, stored: str) -> None:
        tokens = derive_tokens(SiteConfig(theme_colors=ThemeColors(primary=stored)))
        assert tokens["--color-primary"] == "#2c251f"
        assert tokens["--color-brand-900"] == "#2c251f"
        assert tokens["--color-primary-deep"] == "#18110b"

    def test_short_hex_expanded(self) -> None:
        tokens = derive_tokens(SiteConfig(theme_colors=ThemeColors(primary="#abc")))
        assert tokens["--color-primary"] == "#aabbcc"

    def test_offsets_from_rules(self) -> None:
        tokens = derive_tokens(get_default_config(), ThemeRules(deep_offset=-10, light_offset=10))
        assert tokens["--color-primary-light"] == "#362f29"

    def test_deterministic(self) -> None:
        config = get_default_config()
        assert derive_tokens(config) == derive_tokens(config)


class TestThemeApplier:
    def test_applies_once_for_same_config(self, render_context) -> None:
        applier = ThemeApplier(render_context)
        config = get_default_config()
        assert applier.apply(config) is True
        assert applier.apply(config) is False
        assert applier.apply(config.model_copy(deep=True)) is False
        assert len(render_context.applied) == 1

    def test_reapplies_on_change(self, render_context) -> None:
        applier = ThemeApplier(render_context)
        applier.apply(get_default_config())
        changed = get_default_config().model_copy(update={"border_radius": "12px"})
        assert applier.apply(changed) is True
        assert render_context.applied[-1]["--radius"] == "12px"

    def test_layout_only_change_does_not_reapply(self, render_context) -> None:
        applier = ThemeApplier(render_context)
        config = get_default_config()
        applier.apply(config)
        config.home_layout = config.home_layout[:2]
        assert applier.apply(config) is False

    def test_css_context_stylesheet(self) -> None:
        context = CssVariableContext()
        ThemeApplier(context).apply(get_default_config())
        css = context.stylesheet()
        assert css.startswith(":root {")
        assert "  --color-primary: #2c251f;" in css
        assert "navbar-layout" not in css
        assert context.root_attributes() == {"data-navbar-layout": "center"}
        assert context.apply_count == 1
