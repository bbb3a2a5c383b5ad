"""
Orders component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.entities import Order, ShippingAddress


@dataclass(frozen=True)
class PlaceOrderInput:
    """Customer details captured at checkout."""

    customer: ShippingAddress


@dataclass(frozen=True)
class PlaceOrderOutput:
    order: Order | None
    error: str | None = None
    success: bool = True


@dataclass(frozen=True)
class UpdateOrderStatusInput:
    order_id: str
    status: str


@dataclass(frozen=True)
class UpdateOrderStatusOutput:
    order: Order | None
    error: str | None = None
    success: bool = True
