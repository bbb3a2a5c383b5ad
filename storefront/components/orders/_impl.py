"""
OrderPlacement - checkout and order administration.

Key behaviors:
- place_order() snapshots the cart (items and total) with status Pending and
  today's date, submits it, and clears the cart only after the store accepts
- a rejected or failed submission leaves the cart exactly as it was
- status changes require the "orders" capability
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.components.cart import CartEngine
from storefront.domain.entities import ORDER_STATUSES, Order, ShippingAddress, User
from storefront.domain.errors import OrderPlacementError, RemoteStoreError
from storefront.domain.policy import PolicyEngine
from storefront.ports.clock import ClockPort
from storefront.ports.remote_store import RemoteStorePort

logger = logging.getLogger(__name__)


def build_order_payload(cart: CartEngine, customer: ShippingAddress, order_date: str) -> dict[str, Any]:
    """Wire body for a new order; items are copies, not live cart lines."""
    return {
        "customerName": customer.name,
        "email": customer.email,
        "shippingAddress": customer.to_wire(),
        "items": [item.to_wire() for item in cart.items],
        "total": cart.total,
        "status": "Pending",
        "date": order_date,
    }


class OrderPlacement:
    def __init__(
        self,
        remote: RemoteStorePort,
        cart: CartEngine,
        clock: ClockPort,
        policy: PolicyEngine | None = None,
    ) -> None:
        self._remote = remote
        self._cart = cart
        self._clock = clock
        self._policy = policy or PolicyEngine()
        self._orders: list[Order] = []

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    def refresh_orders(self, actor: User | None) -> list[Order]:
        self._policy.require(actor, "orders")
        self._orders = self._remote.list_orders()
        return self.orders

    def place_order(self, customer: ShippingAddress) -> Order:
        """
        Submit the current cart as a new order.

        Raises:
            OrderPlacementError: If the cart is empty or the store rejects the order.
        """
        if self._cart.is_empty():
            raise OrderPlacementError("Cart is empty")

        payload = build_order_payload(self._cart, customer, self._clock.now().date().isoformat())
        try:
            order = self._remote.create_order(payload)
        except RemoteStoreError as e:
            logger.error("Order submission failed: %s", e)
            raise OrderPlacementError(f"Failed to place order: {e}") from e

        self._orders.insert(0, order)
        self._cart.clear()
        return order

    def update_order_status(self, actor: User | None, order_id: str, status: str) -> Order:
        """
        Change an order's status.

        Raises:
            LoginRequiredError / PermissionDeniedError: If the actor may not manage orders.
            ValueError: If the status is not a known order status.
            RemoteStoreError: If the store rejects the change.
        """
        self._policy.require(actor, "orders")
        if status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status}")
        updated = self._remote.update_order_status(order_id, status)
        self._orders = [updated if o.id == updated.id else o for o in self._orders]
        return updated
