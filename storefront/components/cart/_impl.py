"""
CartEngine - local shopping cart.

Lines are identified by (product id, size, color); two items with the same
key are one line. Quantities never drop below 1 through update_quantity().
Nothing here talks to the remote store.
"""

from __future__ import annotations

from storefront.domain.entities import CartItem, CartKey


class CartEngine:
    def __init__(self, items: list[CartItem] | None = None) -> None:
        self._lines: list[CartItem] = []
        for item in items or []:
            self.add_to_cart(item)

    @property
    def items(self) -> list[CartItem]:
        return [line.model_copy(deep=True) for line in self._lines]

    @property
    def total(self) -> float:
        return sum(line.line_total for line in self._lines)

    @property
    def count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def _find(self, key: CartKey) -> CartItem | None:
        for line in self._lines:
            if line.key == key:
                return line
        return None

    def add_to_cart(self, item: CartItem) -> CartItem:
        """Merge into the line with the same key, or append a new line."""
        line = self._find(item.key)
        if line is not None:
            line.quantity += item.quantity
            return line.model_copy(deep=True)
        line = item.model_copy(deep=True)
        self._lines.append(line)
        return line.model_copy(deep=True)

    def remove_from_cart(self, product_id: str, size: str, color: str) -> bool:
        key = (product_id, size, color)
        before = len(self._lines)
        self._lines = [line for line in self._lines if line.key != key]
        return len(self._lines) != before

    def update_quantity(self, product_id: str, size: str, color: str, delta: int) -> CartItem | None:
        """
        Adjust a line's quantity by `delta`, floored at 1.

        Returns the updated line, or None if no line has this key.
        """
        line = self._find((product_id, size, color))
        if line is None:
            return None
        line.quantity = max(1, line.quantity + delta)
        return line.model_copy(deep=True)

    def clear(self) -> None:
        self._lines = []
