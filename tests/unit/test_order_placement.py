import pytest
from fakes import FakeRemoteStore, make_item, make_product

from storefront.components.cart import CartEngine
from storefront.components.orders import (
    OrderPlacement,
    PlaceOrderInput,
    UpdateOrderStatusInput,
    build_order_payload,
    run_place,
    run_update_status,
)
from storefront.domain.entities import ShippingAddress
from storefront.domain.errors import LoginRequiredError, OrderPlacementError, PermissionDeniedError

CUSTOMER = ShippingAddress(name="Ada", email="ada@example.com", address="1 Loom St", city="Leeds", zip="LS1")


@pytest.fixture
def cart():
    cart = CartEngine()
    cart.add_to_cart(make_item(make_product("p1", price=120, discount=99), quantity=2))
    cart.add_to_cart(make_item(make_product("p2", price=45)))
    return cart


@pytest.fixture
def placement(remote: FakeRemoteStore, cart: CartEngine, clock):
    return OrderPlacement(remote, cart, clock)


def test_payload_snapshot(cart: CartEngine) -> None:
    payload = build_order_payload(cart, CUSTOMER, "2025-03-14")
    assert payload["customerName"] == "Ada"
    assert payload["status"] == "Pending"
    assert payload["total"] == pytest.approx(243)
    assert len(payload["items"]) == 2
    assert payload["items"][0]["selectedSize"] == "M"
    assert payload["shippingAddress"]["city"] == "Leeds"


def test_success_clears_cart(placement: OrderPlacement, cart: CartEngine, remote: FakeRemoteStore) -> None:
    order = placement.place_order(CUSTOMER)
    assert cart.is_empty()
    assert order.status == "Pending"
    assert order.date == "2025-03-14"
    assert order.total == pytest.approx(243)
    assert placement.orders[0].id == order.id
    assert remote.orders[0].id == order.id


def test_failure_keeps_cart(placement: OrderPlacement, cart: CartEngine, remote: FakeRemoteStore) -> None:
    before = cart.items
    remote.failing.add("create_order")
    with pytest.raises(OrderPlacementError):
        placement.place_order(CUSTOMER)
    assert cart.items == before
    assert placement.orders == []


def test_order_items_are_snapshot(placement: OrderPlacement, cart: CartEngine) -> None:
    order = placement.place_order(CUSTOMER)
    cart.add_to_cart(make_item(make_product("p3")))
    assert [i.id for i in order.items] == ["p1", "p2"]


def test_empty_cart_makes_no_request(remote: FakeRemoteStore, clock) -> None:
    placement = OrderPlacement(remote, CartEngine(), clock)
    with pytest.raises(OrderPlacementError):
        placement.place_order(CUSTOMER)
    assert "create_order" not in remote.calls


class TestStatusUpdates:
    def test_staff_with_orders_permission(self, placement: OrderPlacement, staff) -> None:
        order = placement.place_order(CUSTOMER)
        updated = placement.update_order_status(staff, order.id, "Shipped")
        assert updated.status == "Shipped"
        assert placement.orders[0].status == "Shipped"

    def test_requires_session(self, placement: OrderPlacement) -> None:
        order = placement.place_order(CUSTOMER)
        with pytest.raises(LoginRequiredError):
            placement.update_order_status(None, order.id, "Shipped")

    def test_requires_permission(self, placement: OrderPlacement, staff) -> None:
        order = placement.place_order(CUSTOMER)
        no_orders = staff.model_copy(update={"permissions": ["products"]})
        with pytest.raises(PermissionDeniedError):
            placement.update_order_status(no_orders, order.id, "Shipped")

    def test_unknown_status(self, placement: OrderPlacement, admin) -> None:
        order = placement.place_order(CUSTOMER)
        with pytest.raises(ValueError):
            placement.update_order_status(admin, order.id, "Lost")

    def test_refresh_orders(self, placement: OrderPlacement, remote: FakeRemoteStore, admin) -> None:
        placement.place_order(CUSTOMER)
        assert len(placement.refresh_orders(admin)) == 1


class TestComponentShell:
    def test_run_place(self, placement: OrderPlacement) -> None:
        out = run_place(PlaceOrderInput(customer=CUSTOMER), placement=placement)
        assert out.success
        assert out.order is not None

    def test_run_place_failure(self, placement: OrderPlacement, remote: FakeRemoteStore) -> None:
        remote.failing.add("create_order")
        out = run_place(PlaceOrderInput(customer=CUSTOMER), placement=placement)
        assert not out.success
        assert "create_order failed" in (out.error or "")

    def test_run_update_status_denied(self, placement: OrderPlacement) -> None:
        order = placement.place_order(CUSTOMER)
        out = run_update_status(
            UpdateOrderStatusInput(order_id=order.id, status="Shipped"),
            placement=placement,
            actor=None,
        )
        assert not out.success
        assert out.error == "Login required"
