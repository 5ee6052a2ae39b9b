"""Use case for creating a product together with its stock row."""

from dataclasses import replace
from decimal import Decimal
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Product, Stock
from app.domain.exceptions import ConflictError, DomainError
from app.infrastructure.database import transaction
from app.infrastructure.repositories import ProductRepository, StockRepository

logger = logging.getLogger(__name__)


def create_product(
    session: Session,
    *,
    name: str,
    description: str,
    price: Decimal,
    quantity: int,
) -> Product:
    """Create the product and its stock atomically.

    Both rows are written inside one transaction; if the stock insert fails the
    product insert is rolled back as well.
    """

    if quantity < 0:
        raise DomainError("Stock quantity cannot be negative")

    products = ProductRepository(session, auto_commit=False)
    stocks = StockRepository(session, auto_commit=False)

    if products.get_by_name(name):
        raise ConflictError("Product name is already in use")

    try:
        with transaction(session):
            product = products.create(
                Product(id=None, name=name, description=description, price=price)
            )
            stock = stocks.create(
                Stock(id=None, product_id=product.id, quantity=quantity)
            )
    except IntegrityError as exc:
        raise ConflictError("Product name is already in use") from exc

    logger.info("Created product %s with %d units in stock", product.id, quantity)
    return replace(product, stock=stock)
