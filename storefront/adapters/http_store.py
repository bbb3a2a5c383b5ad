"""
HTTP client for the storefront API.

Implements RemoteStorePort over httpx. Any httpx.Client works, including
fastapi's TestClient, which lets the client run against an in-process app.

Error responses raise RemoteStoreError carrying the status code and the
body's "error" (or "detail") message; transport failures raise it with no
status code.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.domain.entities import Category, Order, Product, Session
from storefront.domain.errors import RemoteStoreError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("error") or body.get("detail")
        if isinstance(message, str) and message:
            return message
        if message:
            return str(message)
    return f"Request failed with status {response.status_code}"


class HttpRemoteStore:
    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._token: str | None = None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def set_token(self, token: str | None) -> None:
        self._token = token

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {"Authorization": f"Bearer {self._token}"} if self._token else {}
        url = f"{self.base_url}{path}"
        try:
            response = self._client.request(method, url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise RemoteStoreError(f"Could not reach store: {e}") from e

        if response.status_code >= 400:
            raise RemoteStoreError(_error_message(response), status_code=response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s returned a non-JSON body", method, url)
            raise RemoteStoreError(
                f"Store returned an unreadable response: {e}", status_code=response.status_code
            ) from e

    # --- Configuration ---

    def get_config(self) -> dict[str, Any]:
        return self._request("GET", "/config")

    def save_config(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/config", json=payload)

    # --- Products ---

    def list_products(self) -> list[Product]:
        return [Product.model_validate(p) for p in self._request("GET", "/products")]

    def create_product(self, product: Product) -> Product:
        return Product.model_validate(self._request("POST", "/products", json=product.to_wire()))

    def update_product(self, product: Product) -> Product:
        body = self._request("PUT", f"/products/{product.id}", json=product.to_wire())
        return Product.model_validate(body)

    def delete_product(self, product_id: str) -> None:
        self._request("DELETE", f"/products/{product_id}")

    def like_product(self, product_id: str, increment: bool) -> Product:
        body = self._request("POST", f"/products/{product_id}/like", json={"increment": increment})
        return Product.model_validate(body)

    # --- Categories ---

    def list_categories(self) -> list[Category]:
        return [Category.model_validate(c) for c in self._request("GET", "/categories")]

    def create_category(self, category: Category) -> Category:
        return Category.model_validate(self._request("POST", "/categories", json=category.to_wire()))

    def update_category(self, category: Category) -> Category:
        body = self._request("PUT", f"/categories/{category.id}", json=category.to_wire())
        return Category.model_validate(body)

    def delete_category(self, category_id: str) -> None:
        self._request("DELETE", f"/categories/{category_id}")

    # --- Orders ---

    def list_orders(self) -> list[Order]:
        return [Order.model_validate(o) for o in self._request("GET", "/orders")]

    def create_order(self, payload: dict[str, Any]) -> Order:
        return Order.model_validate(self._request("POST", "/orders", json=payload))

    def update_order_status(self, order_id: str, status: str) -> Order:
        body = self._request("PUT", f"/orders/{order_id}", json={"status": status})
        return Order.model_validate(body)

    # --- Auth ---

    def login(self, username: str, password: str) -> Session:
        body = self._request("POST", "/auth/login", json={"username": username, "password": password})
        session = Session.model_validate(body)
        self._token = session.access_token
        return session
