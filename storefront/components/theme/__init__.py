"""
Theme component - render token derivation.
"""

from ._impl import (
    FOOTER_TOKEN_NAMES,
    THEME_TOKEN_NAMES,
    ThemeApplier,
    adjust_brightness,
    derive_tokens,
    parse_hex,
)

__all__ = [
    "FOOTER_TOKEN_NAMES",
    "THEME_TOKEN_NAMES",
    "ThemeApplier",
    "adjust_brightness",
    "derive_tokens",
    "parse_hex",
]
