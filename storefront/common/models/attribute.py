"""
Product attribute models.
An Attribute names a dimension (Size, Color); AttributeValue holds its choices;
ProductAttribute links the values a product is offered in.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from .base import Base


class Attribute(Base):
    __tablename__ = "attribute"

    attribute_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)


class AttributeValue(Base):
    __tablename__ = "attribute_value"

    attribute_value_id = Column(Integer, primary_key=True, autoincrement=True)
    attribute_id = Column(Integer, ForeignKey("attribute.attribute_id"), nullable=False)
    value = Column(String(100), nullable=False)


class ProductAttribute(Base):
    __tablename__ = "product_attribute"

    product_id = Column(Integer, ForeignKey("product.product_id"), primary_key=True)
    attribute_value_id = Column(Integer, ForeignKey("attribute_value.attribute_value_id"), primary_key=True)
