from .auth import Token
from .health import HealthRead
from .product import ProductCreate, ProductRead, ProductUpdate
from .role import RoleCreate, RoleRead, RoleUpdate
from .user import RoleAssignment, UserCreate, UserRead, UserUpdate

__all__ = [
    "HealthRead",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "RoleAssignment",
    "RoleCreate",
    "RoleRead",
    "RoleUpdate",
    "Token",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
