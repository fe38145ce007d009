from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, func
from .base import Base


class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customer.customer_id"), nullable=False, index=True)
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)
    shipping_id = Column(Integer, ForeignKey("shipping.shipping_id"), nullable=False)
    tax_id = Column(Integer, ForeignKey("tax.tax_id"), nullable=False)
    status = Column(Integer, nullable=False, default=0)
    comments = Column(String(255), nullable=True)
    reference = Column(String(50), nullable=True)
    created_on = Column(DateTime, nullable=False, server_default=func.now())
    shipped_on = Column(DateTime, nullable=True)


class OrderDetail(Base):
    __tablename__ = "order_detail"

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    attributes = Column(String(1000), nullable=False)
    product_name = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_cost = Column(Numeric(10, 2), nullable=False)
