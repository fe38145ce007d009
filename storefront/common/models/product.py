from sqlalchemy import Column, Integer, Numeric, String, SmallInteger
from .base import Base


class Product(Base):
    __tablename__ = "product"

    product_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(1000), nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)
    discounted_price = Column(Numeric(10, 2), nullable=False, default=0)
    image = Column(String(150), nullable=True)
    image_2 = Column(String(150), nullable=True)
    thumbnail = Column(String(150), nullable=True)
    display = Column(SmallInteger, nullable=False, default=0)
