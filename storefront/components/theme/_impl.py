"""
Theme token derivation and application.

Key behaviors:
- adjust_brightness() adds one integer offset to each of R, G, B and clamps
  each channel to [0, 255]; it is the only color-derivation rule
- derive_tokens() is pure: same SiteConfig, same token map
- ThemeApplier pushes tokens to the render context only when they changed,
  so re-applying an unchanged document is invisible
"""

from __future__ import annotations

import logging
import re

from storefront.domain.entities import FooterColors, SiteConfig, ThemeColors
from storefront.ports.render import RenderContextPort
from storefront.rules.models import ThemeRules

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

THEME_TOKEN_NAMES: tuple[str, ...] = ("background", "surface", "border", "primary", "secondary")
FOOTER_TOKEN_NAMES: tuple[str, ...] = ("background", "text", "border")


def parse_hex(color: str) -> tuple[int, int, int]:
    """
    Parse "#rgb" or "#rrggbb" (leading # optional).

    Raises:
        ValueError: If the string is not a hex color.
    """
    match = _HEX_RE.match(color.strip()) if isinstance(color, str) else None
    if match is None:
        raise ValueError(f"Invalid hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _clamp(channel: int) -> int:
    return max(0, min(255, channel))


def adjust_brightness(color: str, offset: int) -> str:
    """Shift each channel of `color` by `offset`, clamped, as lowercase #rrggbb."""
    r, g, b = parse_hex(color)
    return "#{:02x}{:02x}{:02x}".format(_clamp(r + offset), _clamp(g + offset), _clamp(b + offset))


def _safe_color(value: str | None, fallback: str) -> str:
    """`value` as lowercase #rrggbb, or `fallback` if it is empty or not a hex color."""
    if not value:
        return adjust_brightness(fallback, 0)
    try:
        return adjust_brightness(value, 0)
    except ValueError:
        logger.warning("Invalid theme color %r, using %s", value, fallback)
        return adjust_brightness(fallback, 0)


def derive_tokens(config: SiteConfig, rules: ThemeRules | None = None) -> dict[str, str]:
    """Flat map of render variables for a configuration document."""
    rules = rules or ThemeRules()
    theme_defaults = ThemeColors()
    footer_defaults = FooterColors()
    tokens: dict[str, str] = {}

    base: dict[str, str] = {}
    for name in THEME_TOKEN_NAMES:
        color = _safe_color(getattr(config.theme_colors, name), getattr(theme_defaults, name))
        base[name] = color
        tokens[f"--color-{name}"] = color
        tokens[f"--color-{name}-deep"] = adjust_brightness(color, rules.deep_offset)
        tokens[f"--color-{name}-light"] = adjust_brightness(color, rules.light_offset)

    for name in FOOTER_TOKEN_NAMES:
        color = _safe_color(getattr(config.footer_colors, name), getattr(footer_defaults, name))
        tokens[f"--color-footer-{name}"] = color

    # Brand scale read by the page templates
    tokens["--color-brand-50"] = base["background"]
    tokens["--color-brand-100"] = base["surface"]
    tokens["--color-brand-200"] = base["secondary"]
    tokens["--color-brand-300"] = adjust_brightness(base["secondary"], rules.light_offset)
    tokens["--color-brand-800"] = adjust_brightness(base["primary"], rules.light_offset)
    tokens["--color-brand-900"] = base["primary"]

    tokens["--radius"] = config.border_radius or "2px"
    tokens["--font-sans"] = config.font_sans or "Inter"
    tokens["--font-serif"] = config.font_serif or "Cormorant Garamond"
    tokens["navbar-layout"] = config.navbar_layout
    return tokens


class ThemeApplier:
    """Applies derived tokens to one render context."""

    def __init__(self, context: RenderContextPort, rules: ThemeRules | None = None) -> None:
        self._context = context
        self._rules = rules or ThemeRules()
        self._applied: dict[str, str] | None = None

    @property
    def applied_tokens(self) -> dict[str, str] | None:
        return dict(self._applied) if self._applied is not None else None

    def apply(self, config: SiteConfig) -> bool:
        """Returns True if the context was updated."""
        tokens = derive_tokens(config, self._rules)
        if tokens == self._applied:
            return False
        self._context.apply_tokens(dict(tokens))
        self._applied = tokens
        return True

    # Usable directly as a ConfigStore listener
    __call__ = apply
