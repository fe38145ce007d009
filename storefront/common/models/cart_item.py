from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from .base import Base


class CartItem(Base):
    __tablename__ = "shopping_cart"
    # upserts in CartService target this constraint
    __table_args__ = (UniqueConstraint("cart_id", "product_id", "attributes", name="uq_cart_line"),)

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    cart_id = Column(String(32), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("product.product_id"), nullable=False)
    attributes = Column(String(1000), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    buy_now = Column(Boolean, nullable=False, default=True)
    added_on = Column(DateTime, nullable=False, server_default=func.now())
