"""Shopping cart and order routes."""

from __future__ import annotations

from flask import Blueprint

from ..common.utils.dto import money
from .commands import parse_add_cart_item, parse_checkout, parse_quantity, request_payload
from .context import components, token_required
from .responses import ok


cart_bp = Blueprint("cart", __name__)


def _cart():
    return components()["cart_service"]


def _orders():
    return components()["order_service"]


@cart_bp.get("/shoppingcart/generateUniqueId")
def generate_unique_id():
    return ok({"cart_id": _cart().generate_cart_id()})


@cart_bp.post("/shoppingcart/add")
def add_item():
    cmd = parse_add_cart_item(request_payload())
    line = _cart().add_item(cart_id=cmd.cart_id, product_id=cmd.product_id, attributes=cmd.attributes)
    return ok(line, 201)


@cart_bp.get("/shoppingcart/<cart_id>")
def get_cart(cart_id: str):
    return ok(_cart().get_items(cart_id))


@cart_bp.put("/shoppingcart/update/<id:item_id>")
def update_item(item_id: int):
    quantity = parse_quantity(request_payload())
    return ok(_cart().update_quantity(item_id=item_id, quantity=quantity))


@cart_bp.delete("/shoppingcart/empty/<cart_id>")
def empty_cart(cart_id: str):
    _cart().clear(cart_id)
    return ok([])


@cart_bp.delete("/shoppingcart/removeProduct/<id:item_id>")
def remove_item(item_id: int):
    _cart().remove_item(item_id)
    return ok([])


@cart_bp.get("/shoppingcart/totalAmount/<cart_id>")
def total_amount(cart_id: str):
    return ok({"total_amount": money(_cart().total_amount(cart_id))})


@cart_bp.get("/shoppingcart/saveForLater/<id:item_id>")
def save_for_later(item_id: int):
    _cart().save_for_later(item_id)
    return ok([])


@cart_bp.get("/shoppingcart/moveToCart/<id:item_id>")
def move_to_cart(item_id: int):
    _cart().move_to_cart(item_id)
    return ok([])


@cart_bp.get("/shoppingcart/getSaved/<cart_id>")
def get_saved(cart_id: str):
    return ok(_cart().get_saved(cart_id))


@cart_bp.post("/orders")
@token_required
def create_order(customer_id: int):
    cmd = parse_checkout(request_payload())
    return ok(_orders().checkout(cmd, customer_id=customer_id), 201)


@cart_bp.get("/orders/inCustomer")
@token_required
def customer_orders(customer_id: int):
    return ok(_orders().list_orders(customer_id))


@cart_bp.get("/orders/<id:order_id>")
@token_required
def order_detail(order_id: int, customer_id: int):
    return ok(_orders().get_order_detail(order_id, customer_id))


@cart_bp.get("/orders/shortDetail/<id:order_id>")
@token_required
def order_summary(order_id: int, customer_id: int):
    return ok(_orders().get_order_summary(order_id, customer_id))
