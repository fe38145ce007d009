from .attributes import attributes_bp
from .cart import cart_bp
from .customers import customers_bp
from .health import health_bp
from .products import products_bp
from .shipping import shipping_bp

BLUEPRINTS = (health_bp, customers_bp, products_bp, attributes_bp, shipping_bp, cart_bp)

__all__ = ["BLUEPRINTS"]
