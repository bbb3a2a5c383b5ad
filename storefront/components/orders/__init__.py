"""
Orders component - checkout and order status.
"""

from ._impl import OrderPlacement, build_order_payload
from .component import run_place, run_update_status
from .models import PlaceOrderInput, PlaceOrderOutput, UpdateOrderStatusInput, UpdateOrderStatusOutput

__all__ = [
    # Component entry points
    "run_place",
    "run_update_status",
    # Service
    "OrderPlacement",
    "build_order_payload",
    # Models
    "PlaceOrderInput",
    "PlaceOrderOutput",
    "UpdateOrderStatusInput",
    "UpdateOrderStatusOutput",
]
