from typing import Any, Protocol

from storefront.domain.entities import Category, Order, Product, User


class ConfigRepoPort(Protocol):
    def get(self) -> dict[str, Any] | None: ...
    def save(self, document: dict[str, Any]) -> dict[str, Any]: ...


class ProductRepoPort(Protocol):
    def save(self, product: Product) -> Product: ...
    def get_by_id(self, product_id: str) -> Product | None: ...
    def list_all(self) -> list[Product]: ...
    def delete(self, product_id: str) -> bool: ...
    def adjust_likes(self, product_id: str, delta: int) -> Product | None: ...


class CategoryRepoPort(Protocol):
    def save(self, category: Category) -> Category: ...
    def get_by_id(self, category_id: str) -> Category | None: ...
    def list_all(self) -> list[Category]: ...
    def delete(self, category_id: str) -> bool: ...


class OrderRepoPort(Protocol):
    def save(self, order: Order) -> Order: ...
    def get_by_id(self, order_id: str) -> Order | None: ...
    def list_all(self) -> list[Order]: ...
    def update_status(self, order_id: str, status: str) -> Order | None: ...


class UserRepoPort(Protocol):
    def save(self, user: User, password_hash: str) -> User: ...
    def get_by_id(self, user_id: str) -> User | None: ...
    def get_by_username(self, username: str) -> User | None: ...
    def get_credentials(self, username: str) -> tuple[User, str] | None: ...
    def list_all(self) -> list[User]: ...
    def update_password_hash(self, user_id: str, password_hash: str) -> bool: ...
    def delete(self, user_id: str) -> bool: ...


class PasswordHasherPort(Protocol):
    def hash_password(self, password: str) -> str: ...
    def verify_password(self, password: str, hash_str: str) -> bool: ...
