"""Aggregate application use cases."""

from .products import create_product
from .users import authenticate_user, create_user

__all__ = [
    "authenticate_user",
    "create_product",
    "create_user",
]
