"""Store services; each opens its own session per call."""

from .attribute_service import AttributeService
from .cart_service import CartService
from .catalog_service import CatalogService
from .customer_service import AddressUpdate, CustomerService, ProfileUpdate
from .order_service import CheckoutCommand, OrderService
from .shipping_service import ShippingService, TaxService
from .token_service import IssuedToken, TokenService

__all__ = [
    "AttributeService",
    "CartService",
    "CatalogService",
    "AddressUpdate",
    "CustomerService",
    "ProfileUpdate",
    "CheckoutCommand",
    "OrderService",
    "ShippingService",
    "TaxService",
    "IssuedToken",
    "TokenService",
]
