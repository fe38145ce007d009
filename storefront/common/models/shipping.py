from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from .base import Base


class ShippingRegion(Base):
    __tablename__ = "shipping_region"

    shipping_region_id = Column(Integer, primary_key=True, autoincrement=True)
    shipping_region = Column(String(100), nullable=False)


class Shipping(Base):
    __tablename__ = "shipping"

    shipping_id = Column(Integer, primary_key=True, autoincrement=True)
    shipping_type = Column(String(100), nullable=False)
    shipping_cost = Column(Numeric(10, 2), nullable=False)
    shipping_region_id = Column(Integer, ForeignKey("shipping_region.shipping_region_id"), nullable=False)
