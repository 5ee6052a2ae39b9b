"""Use case for listing products."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.infrastructure.repositories import ProductRepository


def list_products(
    session: Session, *, skip: int = 0, limit: int = 100
) -> Sequence[Product]:
    return ProductRepository(session).list(skip=skip, limit=limit)
