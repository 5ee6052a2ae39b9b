"""Use case for deleting a product."""

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.infrastructure.database import transaction
from app.infrastructure.repositories import ProductRepository


def delete_product(session: Session, product_id: int) -> None:
    """Delete the product; its stock row goes with it."""

    repository = ProductRepository(session, auto_commit=False)
    if repository.get(product_id) is None:
        raise NotFoundError("Product", product_id)
    with transaction(session):
        repository.delete(product_id)
