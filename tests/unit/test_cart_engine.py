import pytest
from fakes import make_item, make_product

from storefront.components.cart import CartEngine


@pytest.fixture
def cart():
    return CartEngine()


def test_add_new_line(cart: CartEngine) -> None:
    cart.add_to_cart(make_item(make_product("p1"), quantity=2))
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 2


def test_same_key_merges_quantity(cart: CartEngine) -> None:
    product = make_product("p1")
    cart.add_to_cart(make_item(product, quantity=1))
    cart.add_to_cart(make_item(product, quantity=2))
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 3


@pytest.mark.parametrize(
    "size,color",
    [("L", "Red"), ("M", "Blue"), ("L", "Blue")],
)
def test_different_size_or_color_is_new_line(cart: CartEngine, size: str, color: str) -> None:
    product = make_product("p1")
    cart.add_to_cart(make_item(product, size="M", color="Red"))
    cart.add_to_cart(make_item(product, size=size, color=color))
    assert len(cart.items) == 2


def test_key_matches_after_serialization_round_trip(cart: CartEngine) -> None:
    item = make_item(make_product("p1"))
    cart.add_to_cart(item)
    rehydrated = type(item).model_validate(item.to_wire())
    cart.add_to_cart(rehydrated)
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 2


def test_remove_from_cart(cart: CartEngine) -> None:
    product = make_product("p1")
    cart.add_to_cart(make_item(product, size="M"))
    cart.add_to_cart(make_item(product, size="S"))
    assert cart.remove_from_cart("p1", "M", "Red") is True
    assert [i.selected_size for i in cart.items] == ["S"]
    assert cart.remove_from_cart("p1", "M", "Red") is False


def test_update_quantity_floor(cart: CartEngine) -> None:
    cart.add_to_cart(make_item(make_product("p1"), quantity=3))
    line = cart.update_quantity("p1", "M", "Red", -10)
    assert line is not None and line.quantity == 1
    assert cart.update_quantity("p1", "M", "Red", -1).quantity == 1
    assert cart.update_quantity("p1", "M", "Red", 4).quantity == 5


def test_update_quantity_missing_line(cart: CartEngine) -> None:
    assert cart.update_quantity("ghost", "M", "Red", 1) is None


def test_total_uses_discount_price(cart: CartEngine) -> None:
    cart.add_to_cart(make_item(make_product("p1", price=120, discount=99), quantity=2))
    cart.add_to_cart(make_item(make_product("p2", price=45), quantity=1))
    assert cart.total == pytest.approx(99 * 2 + 45)
    assert cart.count == 3


def test_zero_discount_means_list_price(cart: CartEngine) -> None:
    cart.add_to_cart(make_item(make_product("p1", price=50, discount=0)))
    assert cart.total == 50


def test_items_are_copies(cart: CartEngine) -> None:
    cart.add_to_cart(make_item(make_product("p1")))
    cart.items[0].quantity = 99
    assert cart.items[0].quantity == 1


def test_added_item_not_aliased(cart: CartEngine) -> None:
    item = make_item(make_product("p1"))
    cart.add_to_cart(item)
    item.quantity = 50
    assert cart.items[0].quantity == 1


def test_clear(cart: CartEngine) -> None:
    cart.add_to_cart(make_item(make_product("p1")))
    cart.clear()
    assert cart.is_empty()
    assert cart.total == 0
