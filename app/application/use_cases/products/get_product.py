"""Use case for retrieving a single product."""

from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import ProductRepository


def get_product(session: Session, product_id: int) -> Product:
    """Return the product identified by ``product_id`` or raise an error."""

    product = ProductRepository(session).get(product_id)
    if product is None:
        raise NotFoundError("Product", product_id)
    return product
