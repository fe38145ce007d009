from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List
from ..db.session import get_session, translate_errors
from ..errors import NotFoundError, PersistenceError
from ..models.cart_item import CartItem
from ..models.order import Order, OrderDetail
from ..models.product import Product
from ..models.shipping import Shipping
from ..models.tax import Tax
from ..utils.dto import money, to_order_dto
from .logging import log_event


@dataclass(frozen=True)
class CheckoutCommand:
    cart_id: str
    shipping_id: int
    tax_id: int


class OrderService:
    """Order creation and retrieval backed by DB."""

    def __init__(self, session_factory=get_session):
        self._session_factory = session_factory

    def checkout(self, command: CheckoutCommand, *, customer_id: int) -> Dict:
        """Turn the cart into an order owned by ``customer_id``.

        The order header and every detail row are written in one session, so a
        failure on any row leaves no trace of the attempt. The cart itself is
        not modified.
        """
        try:
            with translate_errors("order.checkout"), self._session_factory() as session:
                lines = (
                    session.query(CartItem, Product)
                    .join(Product, Product.product_id == CartItem.product_id)
                    .filter(CartItem.cart_id == command.cart_id, CartItem.buy_now.is_(True))
                    .order_by(CartItem.item_id)
                    .all()
                )
                if not lines:
                    raise NotFoundError(f"Cart {command.cart_id} has no items", code="CRT_02", field="cart_id")
                if session.get(Shipping, command.shipping_id) is None:
                    raise NotFoundError(f"Shipping option {command.shipping_id} does not exist", code="SHP_02", field="shipping_id")
                if session.get(Tax, command.tax_id) is None:
                    raise NotFoundError(f"Tax {command.tax_id} does not exist", code="TAX_01", field="tax_id")

                total = Decimal("0")
                for item, product in lines:
                    total += Decimal(product.price) * item.quantity

                order = Order(
                    customer_id=customer_id,
                    total_amount=total,
                    shipping_id=command.shipping_id,
                    tax_id=command.tax_id,
                    status=0,
                )
                session.add(order)
                session.flush()

                for item, product in lines:
                    session.add(
                        OrderDetail(
                            order_id=order.order_id,
                            product_id=item.product_id,
                            attributes=item.attributes,
                            product_name=product.name,
                            quantity=item.quantity,
                            unit_cost=Decimal(product.price),
                        )
                    )
                    session.flush()
                order_id = order.order_id
        except Exception as exc:
            level = "error" if isinstance(exc, PersistenceError) else "warning"
            log_event(level, "order.checkout_failed", cart_id=command.cart_id, customer_id=customer_id, error=str(exc))
            raise

        log_event("info", "order.created", order_id=order_id, customer_id=customer_id, items=len(lines), total_amount=total)
        return {"order_id": order_id}

    def list_orders(self, customer_id: int) -> List[Dict]:
        with translate_errors("order.list_orders"), self._session_factory() as session:
            rows = (
                session.query(Order)
                .filter(Order.customer_id == customer_id)
                .order_by(Order.order_id)
                .all()
            )
            return [to_order_dto(o) for o in rows]

    def get_order_detail(self, order_id: int, customer_id: int) -> List[Dict]:
        """Detail rows of an order, only if ``customer_id`` owns it."""
        with translate_errors("order.get_order_detail"), self._session_factory() as session:
            rows = (
                session.query(OrderDetail)
                .join(Order, Order.order_id == OrderDetail.order_id)
                .filter(OrderDetail.order_id == order_id, Order.customer_id == customer_id)
                .order_by(OrderDetail.item_id)
                .all()
            )
            if not rows:
                raise NotFoundError(f"Order {order_id} not found", code="ORD_01", field="order_id")
            return [
                {
                    "order_id": d.order_id,
                    "product_id": d.product_id,
                    "attributes": d.attributes,
                    "product_name": d.product_name,
                    "quantity": d.quantity,
                    "unit_cost": money(d.unit_cost),
                    "subtotal": money(Decimal(d.unit_cost) * d.quantity),
                }
                for d in rows
            ]

    def get_order_summary(self, order_id: int, customer_id: int) -> Dict:
        with translate_errors("order.get_order_summary"), self._session_factory() as session:
            order = (
                session.query(Order)
                .filter(Order.order_id == order_id, Order.customer_id == customer_id)
                .first()
            )
            if not order:
                raise NotFoundError(f"Order {order_id} not found", code="ORD_01", field="order_id")
            return to_order_dto(order)
