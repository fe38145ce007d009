from sqlalchemy import Column, ForeignKey, Integer
from .base import Base


class ProductCategory(Base):
    __tablename__ = "product_category"

    product_id = Column(Integer, ForeignKey("product.product_id"), primary_key=True)
    category_id = Column(Integer, ForeignKey("category.category_id"), primary_key=True)
