"""Domain entities exposed by the application."""

from .product import Product, Stock
from .role import Role
from .user import User

__all__ = [
    "Product",
    "Role",
    "Stock",
    "User",
]
