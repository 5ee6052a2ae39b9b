"""ORM models used by the application infrastructure."""

from .product import ProductModel, StockModel
from .role import RoleModel
from .user import UserModel, user_role_table

__all__ = [
    "ProductModel",
    "RoleModel",
    "StockModel",
    "UserModel",
    "user_role_table",
]
