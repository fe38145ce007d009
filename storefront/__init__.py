"""Online store backend: catalog, carts, checkout and orders."""

__version__ = "0.1.0"
