import json
import sqlite3
from datetime import UTC, datetime
from typing import Any

from storefront.domain.entities import Category, Order, Product, User


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn


class SQLiteConfigRepo(_SQLiteRepo):
    """The singleton configuration document, stored as one JSON row."""

    def get(self) -> dict[str, Any] | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT document FROM site_config WHERE id = 1").fetchone()
            if not row:
                return None
            doc = json.loads(row["document"])
            return doc if isinstance(doc, dict) else None
        finally:
            conn.close()

    def save(self, document: dict[str, Any]) -> dict[str, Any]:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO site_config (id, document, updated_at) VALUES (1, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    document=excluded.document,
                    updated_at=excluded.updated_at
            """,
                (json.dumps(document), datetime.now(UTC).isoformat()),
            )
            conn.commit()
        finally:
            conn.close()
        return document


class SQLiteProductRepo(_SQLiteRepo):
    def save(self, product: Product) -> Product:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO products (
                    id, name, description, price, discount_price, category,
                    images, sizes, colors, new_arrival, best_seller, stock,
                    likes, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name=excluded.name,
                    description=excluded.description,
                    price=excluded.price,
                    discount_price=excluded.discount_price,
                    category=excluded.category,
                    images=excluded.images,
                    sizes=excluded.sizes,
                    colors=excluded.colors,
                    new_arrival=excluded.new_arrival,
                    best_seller=excluded.best_seller,
                    stock=excluded.stock,
                    likes=excluded.likes
            """,
                (
                    product.id,
                    product.name,
                    product.description,
                    product.price,
                    product.discount_price,
                    product.category,
                    json.dumps(product.images),
                    json.dumps(product.sizes),
                    json.dumps(product.colors),
                    int(product.new_arrival),
                    int(product.best_seller),
                    product.stock,
                    product.likes,
                    datetime.now(UTC).isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        return product

    def get_by_id(self, product_id: str) -> Product | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM products WHERE id = ?", (product_id,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_all(self) -> list[Product]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM products ORDER BY created_at DESC, rowid DESC").fetchall()
            return [self._map_row(r) for r in rows]
        finally:
            conn.close()

    def delete(self, product_id: str) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute("DELETE FROM products WHERE id = ?", (product_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def adjust_likes(self, product_id: str, delta: int) -> Product | None:
        """Move the like counter by `delta`, never below zero."""
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                "UPDATE products SET likes = MAX(0, likes + ?) WHERE id = ?",
                (delta, product_id),
            )
            conn.commit()
            if cursor.rowcount == 0:
                return None
            row = conn.execute("SELECT * FROM products WHERE id = ?", (product_id,)).fetchone()
            return self._map_row(row)
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Product:
        return Product(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            price=row["price"],
            discount_price=row["discount_price"],
            category=row["category"],
            images=json.loads(row["images"]),
            sizes=json.loads(row["sizes"]),
            colors=json.loads(row["colors"]),
            new_arrival=bool(row["new_arrival"]),
            best_seller=bool(row["best_seller"]),
            stock=row["stock"],
            likes=row["likes"],
        )


class SQLiteCategoryRepo(_SQLiteRepo):
    def save(self, category: Category) -> Category:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO categories (id, name, image) VALUES (?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name=excluded.name,
                    image=excluded.image
            """,
                (category.id, category.name, category.image),
            )
            conn.commit()
        finally:
            conn.close()
        return category

    def get_by_id(self, category_id: str) -> Category | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM categories WHERE id = ?", (category_id,)).fetchone()
            return Category(**row) if row else None
        finally:
            conn.close()

    def list_all(self) -> list[Category]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM categories ORDER BY rowid").fetchall()
            return [Category(**r) for r in rows]
        finally:
            conn.close()

    def delete(self, category_id: str) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute("DELETE FROM categories WHERE id = ?", (category_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()


class SQLiteOrderRepo(_SQLiteRepo):
    def save(self, order: Order) -> Order:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO orders (
                    id, customer_name, email, shipping_address, items,
                    total, status, date, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    status=excluded.status
            """,
                (
                    order.id,
                    order.customer_name,
                    order.email,
                    json.dumps(order.shipping_address.to_wire()),
                    json.dumps([item.to_wire() for item in order.items]),
                    order.total,
                    order.status,
                    order.date,
                    datetime.now(UTC).isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        return order

    def get_by_id(self, order_id: str) -> Order | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM orders WHERE id = ?", (order_id,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_all(self) -> list[Order]:
        """Newest first."""
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM orders ORDER BY created_at DESC, rowid DESC").fetchall()
            return [self._map_row(r) for r in rows]
        finally:
            conn.close()

    def update_status(self, order_id: str, status: str) -> Order | None:
        conn = self._get_conn()
        try:
            cursor = conn.execute("UPDATE orders SET status = ? WHERE id = ?", (status, order_id))
            conn.commit()
            if cursor.rowcount == 0:
                return None
            row = conn.execute("SELECT * FROM orders WHERE id = ?", (order_id,)).fetchone()
            return self._map_row(row)
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Order:
        return Order.model_validate(
            {
                "id": row["id"],
                "customerName": row["customer_name"],
                "email": row["email"],
                "shippingAddress": json.loads(row["shipping_address"]),
                "items": json.loads(row["items"]),
                "total": row["total"],
                "status": row["status"],
                "date": row["date"],
            }
        )


class SQLiteUserRepo(_SQLiteRepo):
    def save(self, user: User, password_hash: str) -> User:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO users (
                    id, username, password_hash, role, permissions, created_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    username=excluded.username,
                    password_hash=excluded.password_hash,
                    role=excluded.role,
                    permissions=excluded.permissions
            """,
                (
                    user.id,
                    user.username,
                    password_hash,
                    user.role,
                    json.dumps(user.permissions),
                    datetime.now(UTC).isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        return user

    def get_by_id(self, user_id: str) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def get_by_username(self, username: str) -> User | None:
        creds = self.get_credentials(username)
        return creds[0] if creds else None

    def get_credentials(self, username: str) -> tuple[User, str] | None:
        """The user and their stored password hash."""
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE username = ?", (username,)).fetchone()
            if not row:
                return None
            return self._map_row(row), row["password_hash"]
        finally:
            conn.close()

    def list_all(self) -> list[User]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM users ORDER BY created_at, rowid").fetchall()
            return [self._map_row(r) for r in rows]
        finally:
            conn.close()

    def update_password_hash(self, user_id: str, password_hash: str) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                "UPDATE users SET password_hash = ? WHERE id = ?", (password_hash, user_id)
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def delete(self, user_id: str) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> User:
        return User(
            id=row["id"],
            username=row["username"],
            role=row["role"],
            permissions=json.loads(row["permissions"]),
        )
