from decimal import Decimal
from typing import Dict, List
from uuid import uuid4
from sqlalchemy.dialects import mysql, postgresql, sqlite
from ..db.session import get_session, translate_errors
from ..errors import NotFoundError, PersistenceError, ValidationError
from ..models.cart_item import CartItem
from ..models.product import Product
from ..utils.dto import money
from .logging import log_event


def _line_dto(item: CartItem, product: Product) -> Dict:
    price = Decimal(product.price)
    return {
        "item_id": item.item_id,
        "cart_id": item.cart_id,
        "name": product.name,
        "attributes": item.attributes,
        "product_id": item.product_id,
        "image": product.image,
        "price": money(price),
        "quantity": item.quantity,
        "subtotal": money(price * item.quantity),
    }


class CartService:
    """Cart operations backed by DB.

    A cart is just the group of ``shopping_cart`` rows sharing a ``cart_id``;
    it belongs to no customer until an order is placed from it.
    """

    _conflict_columns = ["cart_id", "product_id", "attributes"]

    def __init__(self, session_factory=get_session):
        self._session_factory = session_factory

    @staticmethod
    def generate_cart_id() -> str:
        return uuid4().hex

    def _upsert_statement(self, dialect: str, cart_id: str, product_id: int, attributes: str):
        table = CartItem.__table__
        values = {
            "cart_id": cart_id,
            "product_id": product_id,
            "attributes": attributes,
            "quantity": 1,
            "buy_now": True,
        }
        bump = {"quantity": table.c.quantity + 1, "buy_now": True}
        if dialect == "sqlite":
            stmt = sqlite.insert(table).values(**values)
            return stmt.on_conflict_do_update(index_elements=self._conflict_columns, set_=bump)
        if dialect == "postgresql":
            stmt = postgresql.insert(table).values(**values)
            return stmt.on_conflict_do_update(index_elements=self._conflict_columns, set_=bump)
        if dialect in ("mysql", "mariadb"):
            stmt = mysql.insert(table).values(**values)
            return stmt.on_duplicate_key_update(**bump)
        raise PersistenceError(f"Upsert not supported for dialect {dialect!r}")

    def _joined(self, session, *criteria):
        return (
            session.query(CartItem, Product)
            .join(Product, Product.product_id == CartItem.product_id)
            .filter(*criteria)
        )

    def add_item(self, *, cart_id: str, product_id: int, attributes: str) -> Dict:
        """Add one unit of a product variant; repeat adds bump the quantity."""
        with translate_errors("cart.add_item"), self._session_factory() as session:
            if session.get(Product, product_id) is None:
                raise NotFoundError(f"Product {product_id} does not exist", code="PRO_01", field="product_id")
            dialect = session.get_bind().dialect.name
            session.execute(self._upsert_statement(dialect, cart_id, product_id, attributes))
            item, product = self._joined(
                session,
                CartItem.cart_id == cart_id,
                CartItem.product_id == product_id,
                CartItem.attributes == attributes,
            ).one()
            line = _line_dto(item, product)
        log_event("info", "cart.item_added", cart_id=cart_id, product_id=product_id, quantity=line["quantity"])
        return line

    def get_items(self, cart_id: str) -> List[Dict]:
        with translate_errors("cart.get_items"), self._session_factory() as session:
            rows = (
                self._joined(session, CartItem.cart_id == cart_id, CartItem.buy_now.is_(True))
                .order_by(CartItem.item_id)
                .all()
            )
            return [_line_dto(item, product) for item, product in rows]

    def get_saved(self, cart_id: str) -> List[Dict]:
        """Items of the cart set aside with ``save_for_later``."""
        with translate_errors("cart.get_saved"), self._session_factory() as session:
            rows = (
                self._joined(session, CartItem.cart_id == cart_id, CartItem.buy_now.is_(False))
                .order_by(CartItem.item_id)
                .all()
            )
            return [
                {"item_id": item.item_id, "name": product.name, "attributes": item.attributes, "price": money(product.price)}
                for item, product in rows
            ]

    def total_amount(self, cart_id: str) -> Decimal:
        total = Decimal("0")
        for line in self.get_items(cart_id):
            total += Decimal(line["subtotal"])
        return total

    def update_quantity(self, *, item_id: int, quantity: int) -> Dict:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("The field quantity must be a positive integer", field="quantity")
        with translate_errors("cart.update_quantity"), self._session_factory() as session:
            row = self._joined(session, CartItem.item_id == item_id).first()
            if not row:
                raise NotFoundError(f"Cart item {item_id} not found", code="CRT_01", field="item_id")
            item, product = row
            item.quantity = quantity
            session.flush()
            return _line_dto(item, product)

    def _set_buy_now(self, item_id: int, buy_now: bool, operation: str) -> None:
        with translate_errors(operation), self._session_factory() as session:
            item = session.get(CartItem, item_id)
            if not item:
                raise NotFoundError(f"Cart item {item_id} not found", code="CRT_01", field="item_id")
            item.buy_now = buy_now

    def save_for_later(self, item_id: int) -> None:
        self._set_buy_now(item_id, False, "cart.save_for_later")

    def move_to_cart(self, item_id: int) -> None:
        self._set_buy_now(item_id, True, "cart.move_to_cart")

    def remove_item(self, item_id: int) -> None:
        with translate_errors("cart.remove_item"), self._session_factory() as session:
            session.query(CartItem).filter(CartItem.item_id == item_id).delete(synchronize_session=False)
        return None

    def clear(self, cart_id: str) -> None:
        with translate_errors("cart.clear"), self._session_factory() as session:
            removed = session.query(CartItem).filter(CartItem.cart_id == cart_id).delete(synchronize_session=False)
        log_event("info", "cart.cleared", cart_id=cart_id, removed=removed)
        return None
