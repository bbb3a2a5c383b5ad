from __future__ import annotations

from uuid import uuid4

from storefront.domain.entities import ORDER_STATUSES, Order, User
from storefront.domain.errors import NotFoundError
from storefront.domain.policy import PolicyEngine
from storefront.ports.clock import ClockPort
from storefront.ports.repo import OrderRepoPort


class OrderService:
    def __init__(self, repo: OrderRepoPort, policy: PolicyEngine, clock: ClockPort):
        self.repo = repo
        self.policy = policy
        self.clock = clock

    def list_orders(self, actor: User | None) -> list[Order]:
        self.policy.require(actor, "orders")
        return self.repo.list_all()

    def create_order(self, order: Order) -> Order:
        """
        Store a submitted order.

        New orders always start as Pending; a missing date is filled with today.
        """
        if not order.items:
            raise ValueError("Order must contain at least one item")
        new_order = order.model_copy(
            update={
                "id": uuid4().hex,
                "status": "Pending",
                "date": order.date or self.clock.now().date().isoformat(),
            }
        )
        return self.repo.save(new_order)

    def update_status(self, actor: User | None, order_id: str, status: str) -> Order:
        self.policy.require(actor, "orders")
        if status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status}")
        updated = self.repo.update_status(order_id, status)
        if updated is None:
            raise NotFoundError(f"Order {order_id} not found")
        return updated
