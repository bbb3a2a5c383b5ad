from typing import Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from storefront.api.deps import get_optional_user, get_order_service
from storefront.domain.entities import Order, User
from storefront.services.orders import OrderService

router = APIRouter()


class StatusUpdateRequest(BaseModel):
    status: str


@router.get("")
def list_orders(
    user: User | None = Depends(get_optional_user),
    service: OrderService = Depends(get_order_service),
) -> list[dict[str, Any]]:
    """All orders, newest first (requires the orders permission)."""
    return [o.to_wire() for o in service.list_orders(user)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(order: Order, service: OrderService = Depends(get_order_service)) -> dict[str, Any]:
    """Checkout; public."""
    return service.create_order(order).to_wire()


@router.put("/{order_id}")
def update_order_status(
    order_id: str,
    req: StatusUpdateRequest,
    user: User | None = Depends(get_optional_user),
    service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    return service.update_status(user, order_id, req.status).to_wire()
