"""
CatalogCache - client-side copy of products and categories.

refresh() replaces both lists with the store's; admin writes are gated by
the access policy and only touch the cache after the store accepts them.
"""

from __future__ import annotations

from storefront.domain.entities import Category, Product, User
from storefront.domain.policy import PolicyEngine
from storefront.ports.remote_store import RemoteStorePort


class CatalogCache:
    def __init__(self, remote: RemoteStorePort, policy: PolicyEngine | None = None) -> None:
        self._remote = remote
        self._policy = policy or PolicyEngine()
        self._products: list[Product] = []
        self._categories: list[Category] = []

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    def refresh(self) -> None:
        """Reload both collections. Raises RemoteStoreError on failure."""
        products = self._remote.list_products()
        categories = self._remote.list_categories()
        self._products = products
        self._categories = categories

    def get_product(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def replace_product(self, product: Product) -> None:
        """Swap in the store's copy of a product, if it is cached."""
        self._products = [product if p.id == product.id else p for p in self._products]

    # --- Products (admin) ---

    def create_product(self, actor: User | None, product: Product) -> Product:
        self._policy.require(actor, "products")
        created = self._remote.create_product(product)
        self._products.append(created)
        return created

    def update_product(self, actor: User | None, product: Product) -> Product:
        self._policy.require(actor, "products")
        updated = self._remote.update_product(product)
        self.replace_product(updated)
        return updated

    def delete_product(self, actor: User | None, product_id: str) -> None:
        self._policy.require(actor, "products")
        self._remote.delete_product(product_id)
        self._products = [p for p in self._products if p.id != product_id]

    # --- Categories (admin) ---

    def create_category(self, actor: User | None, category: Category) -> Category:
        self._policy.require(actor, "categories")
        created = self._remote.create_category(category)
        self._categories.append(created)
        return created

    def update_category(self, actor: User | None, category: Category) -> Category:
        self._policy.require(actor, "categories")
        updated = self._remote.update_category(category)
        self._categories = [updated if c.id == updated.id else c for c in self._categories]
        return updated

    def delete_category(self, actor: User | None, category_id: str) -> None:
        self._policy.require(actor, "categories")
        self._remote.delete_category(category_id)
        self._categories = [c for c in self._categories if c.id != category_id]
