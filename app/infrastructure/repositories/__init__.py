"""Repository implementations for infrastructure layer."""

from .product_repository import ProductRepository, StockRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "ProductRepository",
    "RoleRepository",
    "StockRepository",
    "UserRepository",
]
