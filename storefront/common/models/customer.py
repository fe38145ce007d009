from sqlalchemy import Column, ForeignKey, Integer, String
from .base import Base


class Customer(Base):
    __tablename__ = "customer"

    customer_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    credit_card = Column(String(255), nullable=True)
    address_1 = Column(String(100), nullable=True)
    address_2 = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    region = Column(String(100), nullable=True)
    postal_code = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    shipping_region_id = Column(Integer, ForeignKey("shipping_region.shipping_region_id"), nullable=True)
    day_phone = Column(String(100), nullable=True)
    eve_phone = Column(String(100), nullable=True)
    mob_phone = Column(String(100), nullable=True)
