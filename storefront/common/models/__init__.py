from .base import Base
from .attribute import Attribute, AttributeValue, ProductAttribute
from .cart_item import CartItem
from .category import Category
from .customer import Customer
from .department import Department
from .order import Order, OrderDetail
from .product import Product
from .product_category import ProductCategory
from .shipping import Shipping, ShippingRegion
from .tax import Tax

__all__ = [
    "Base",
    "Attribute",
    "AttributeValue",
    "ProductAttribute",
    "CartItem",
    "Category",
    "Customer",
    "Department",
    "Order",
    "OrderDetail",
    "Product",
    "ProductCategory",
    "Shipping",
    "ShippingRegion",
    "Tax",
]
