from decimal import Decimal

import pytest

from storefront.common.errors import NotFoundError, ValidationError
from storefront.common.models import CartItem
from storefront.common.services import CartService


@pytest.fixture()
def cart(session_factory):
    return CartService(session_factory)


def _rows(session_factory, cart_id):
    with session_factory() as session:
        return session.query(CartItem).filter(CartItem.cart_id == cart_id).all()


class TestGenerateCartId:
    def test_ids_are_unique_hex(self):
        first, second = CartService.generate_cart_id(), CartService.generate_cart_id()
        assert first != second
        assert len(first) == 32
        int(first, 16)


class TestAddItem:
    def test_first_add_creates_line(self, cart):
        line = cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        assert line["quantity"] == 1
        assert line["name"] == "Arc d'Triomphe"
        assert line["price"] == "10.00"
        assert line["subtotal"] == "10.00"
        assert line["image"] == "arc-d-triomphe.gif"

    @pytest.mark.parametrize("calls", [1, 2, 5])
    def test_repeat_add_increments_single_row(self, cart, session_factory, calls):
        for _ in range(calls):
            line = cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        assert line["quantity"] == calls
        rows = _rows(session_factory, "abc123")
        assert len(rows) == 1
        assert rows[0].quantity == calls

    def test_attributes_distinguish_lines(self, cart, session_factory):
        cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.add_item(cart_id="abc123", product_id=1, attributes="Size,S")
        assert len(_rows(session_factory, "abc123")) == 2

    def test_carts_are_isolated(self, cart):
        cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.add_item(cart_id="other", product_id=1, attributes="Size,M")
        assert cart.get_items("abc123")[0]["quantity"] == 1

    def test_unknown_product(self, cart, session_factory):
        with pytest.raises(NotFoundError) as exc:
            cart.add_item(cart_id="abc123", product_id=999, attributes="Size,M")
        assert exc.value.code == "PRO_01"
        assert _rows(session_factory, "abc123") == []


class TestGetItems:
    def test_unknown_cart_is_empty(self, cart):
        assert cart.get_items("nope") == []

    def test_lines_with_subtotals(self, cart):
        cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.add_item(cart_id="abc123", product_id=2, attributes="Color,White")
        items = cart.get_items("abc123")
        assert [(i["product_id"], i["quantity"], i["subtotal"]) for i in items] == [
            (1, 2, "20.00"),
            (2, 1, "5.50"),
        ]
        assert cart.total_amount("abc123") == Decimal("25.50")

    def test_total_of_unknown_cart_is_zero(self, cart):
        assert cart.total_amount("nope") == Decimal("0")


class TestUpdateQuantity:
    def test_sets_quantity(self, cart):
        line = cart.add_item(cart_id="abc123", product_id=2, attributes="Size,M")
        updated = cart.update_quantity(item_id=line["item_id"], quantity=4)
        assert updated["quantity"] == 4
        assert updated["subtotal"] == "22.00"

    def test_unknown_item(self, cart):
        with pytest.raises(NotFoundError):
            cart.update_quantity(item_id=999, quantity=2)

    @pytest.mark.parametrize("quantity", [0, -1, True, "3", 1.5])
    def test_rejects_non_positive_int(self, cart, quantity):
        line = cart.add_item(cart_id="abc123", product_id=2, attributes="Size,M")
        with pytest.raises(ValidationError):
            cart.update_quantity(item_id=line["item_id"], quantity=quantity)


class TestRemoval:
    def test_remove_item_is_idempotent(self, cart):
        line = cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.remove_item(line["item_id"])
        cart.remove_item(line["item_id"])
        assert cart.get_items("abc123") == []

    def test_clear_removes_whole_cart_only(self, cart):
        cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.add_item(cart_id="abc123", product_id=2, attributes="Size,M")
        cart.add_item(cart_id="other", product_id=2, attributes="Size,M")
        cart.clear("abc123")
        cart.clear("abc123")
        assert cart.get_items("abc123") == []
        assert len(cart.get_items("other")) == 1


class TestSaveForLater:
    def test_saved_items_leave_the_cart(self, cart):
        line = cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.save_for_later(line["item_id"])
        assert cart.get_items("abc123") == []
        saved = cart.get_saved("abc123")
        assert [s["item_id"] for s in saved] == [line["item_id"]]

        cart.move_to_cart(line["item_id"])
        assert cart.get_saved("abc123") == []
        assert len(cart.get_items("abc123")) == 1

    def test_unknown_item(self, cart):
        with pytest.raises(NotFoundError):
            cart.save_for_later(999)

    def test_adding_a_saved_line_returns_it_to_the_cart(self, cart):
        line = cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        cart.save_for_later(line["item_id"])
        again = cart.add_item(cart_id="abc123", product_id=1, attributes="Size,M")
        assert again["item_id"] == line["item_id"]
        assert again["quantity"] == 2
        assert [i["item_id"] for i in cart.get_items("abc123")] == [line["item_id"]]
        assert cart.get_saved("abc123") == []
