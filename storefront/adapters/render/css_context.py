"""
CSS variable render context.

Holds the last applied token set and renders it as a `:root { ... }` block.
Tokens that are not CSS custom properties (no leading "--") become data
attributes on the root element instead.
"""

from __future__ import annotations


class CssVariableContext:
    def __init__(self) -> None:
        self.tokens: dict[str, str] = {}
        self.apply_count = 0

    def apply_tokens(self, tokens: dict[str, str]) -> None:
        self.tokens = dict(tokens)
        self.apply_count += 1

    def root_attributes(self) -> dict[str, str]:
        return {f"data-{k}": v for k, v in self.tokens.items() if not k.startswith("--")}

    def stylesheet(self) -> str:
        lines = [f"  {k}: {v};" for k, v in self.tokens.items() if k.startswith("--")]
        return ":root {\n" + "\n".join(lines) + "\n}\n"
