"""
Remote store port.

The system of record for the configuration document, the catalog, orders,
like counters and logins. Every method is one request/response exchange and
raises RemoteStoreError on an error response or a transport failure.
"""

from typing import Any, Protocol

from storefront.domain.entities import Category, Order, Product, Session


class RemoteStorePort(Protocol):
    # --- Configuration ---
    def get_config(self) -> dict[str, Any]:
        """Fetch the singleton configuration document."""
        ...

    def save_config(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Persist a full or partial document; returns the canonical saved document."""
        ...

    # --- Products ---
    def list_products(self) -> list[Product]: ...

    def create_product(self, product: Product) -> Product: ...

    def update_product(self, product: Product) -> Product: ...

    def delete_product(self, product_id: str) -> None: ...

    def like_product(self, product_id: str, increment: bool) -> Product:
        """Increment or decrement the like counter (floored at zero by the store)."""
        ...

    # --- Categories ---
    def list_categories(self) -> list[Category]: ...

    def create_category(self, category: Category) -> Category: ...

    def update_category(self, category: Category) -> Category: ...

    def delete_category(self, category_id: str) -> None: ...

    # --- Orders ---
    def list_orders(self) -> list[Order]: ...

    def create_order(self, payload: dict[str, Any]) -> Order: ...

    def update_order_status(self, order_id: str, status: str) -> Order: ...

    # --- Auth ---
    def login(self, username: str, password: str) -> Session: ...
