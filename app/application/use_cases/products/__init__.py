"""Use cases for managing products and their stock."""

from .create_product import create_product
from .delete_product import delete_product
from .get_product import get_product
from .list_products import list_products
from .update_product import update_product

__all__ = [
    "create_product",
    "delete_product",
    "get_product",
    "list_products",
    "update_product",
]
