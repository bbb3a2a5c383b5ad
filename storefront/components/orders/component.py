"""
Orders component - functional shell over OrderPlacement.
"""

from __future__ import annotations

from storefront.domain.entities import User
from storefront.domain.errors import OrderPlacementError, StorefrontError

from ._impl import OrderPlacement
from .models import PlaceOrderInput, PlaceOrderOutput, UpdateOrderStatusInput, UpdateOrderStatusOutput


def run_place(inp: PlaceOrderInput, *, placement: OrderPlacement) -> PlaceOrderOutput:
    """
    Place an order for the current cart.

    Returns:
        PlaceOrderOutput with the stored order, or the failure message.
    """
    try:
        order = placement.place_order(inp.customer)
    except OrderPlacementError as e:
        return PlaceOrderOutput(order=None, error=str(e), success=False)
    return PlaceOrderOutput(order=order)


def run_update_status(
    inp: UpdateOrderStatusInput,
    *,
    placement: OrderPlacement,
    actor: User | None,
) -> UpdateOrderStatusOutput:
    try:
        order = placement.update_order_status(actor, inp.order_id, inp.status)
    except (StorefrontError, ValueError) as e:
        return UpdateOrderStatusOutput(order=None, error=str(e), success=False)
    return UpdateOrderStatusOutput(order=order)
