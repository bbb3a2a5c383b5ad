from __future__ import annotations

from uuid import uuid4

from storefront.domain.entities import Category, Product, User
from storefront.domain.errors import NotFoundError
from storefront.domain.policy import PolicyEngine
from storefront.ports.repo import CategoryRepoPort, ProductRepoPort


class CatalogService:
    def __init__(
        self,
        product_repo: ProductRepoPort,
        category_repo: CategoryRepoPort,
        policy: PolicyEngine,
    ):
        self.product_repo = product_repo
        self.category_repo = category_repo
        self.policy = policy

    # --- Products ---

    def list_products(self) -> list[Product]:
        return self.product_repo.list_all()

    def create_product(self, actor: User | None, product: Product) -> Product:
        self.policy.require(actor, "products")
        new_product = product.model_copy(update={"id": product.id or uuid4().hex, "likes": 0})
        return self.product_repo.save(new_product)

    def update_product(self, actor: User | None, product_id: str, product: Product) -> Product:
        self.policy.require(actor, "products")
        existing = self.product_repo.get_by_id(product_id)
        if existing is None:
            raise NotFoundError(f"Product {product_id} not found")
        # The like counter is only moved through like()
        updated = product.model_copy(update={"id": product_id, "likes": existing.likes})
        return self.product_repo.save(updated)

    def delete_product(self, actor: User | None, product_id: str) -> None:
        self.policy.require(actor, "products")
        if not self.product_repo.delete(product_id):
            raise NotFoundError(f"Product {product_id} not found")

    def like(self, product_id: str, increment: bool) -> Product:
        """Move the like counter by one; it never goes below zero."""
        product = self.product_repo.adjust_likes(product_id, 1 if increment else -1)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    # --- Categories ---

    def list_categories(self) -> list[Category]:
        return self.category_repo.list_all()

    def create_category(self, actor: User | None, category: Category) -> Category:
        self.policy.require(actor, "categories")
        new_category = category.model_copy(update={"id": category.id or uuid4().hex})
        return self.category_repo.save(new_category)

    def update_category(self, actor: User | None, category_id: str, category: Category) -> Category:
        self.policy.require(actor, "categories")
        if self.category_repo.get_by_id(category_id) is None:
            raise NotFoundError(f"Category {category_id} not found")
        return self.category_repo.save(category.model_copy(update={"id": category_id}))

    def delete_category(self, actor: User | None, category_id: str) -> None:
        self.policy.require(actor, "categories")
        if not self.category_repo.delete(category_id):
            raise NotFoundError(f"Category {category_id} not found")
