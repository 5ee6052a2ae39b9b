"""Use case for updating a product and its stock quantity."""

from dataclasses import replace
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Product, Stock
from app.domain.exceptions import ConflictError, DomainError, NotFoundError
from app.infrastructure.database import transaction
from app.infrastructure.repositories import ProductRepository, StockRepository


def update_product(
    session: Session,
    *,
    product_id: int,
    name: str | None = None,
    description: str | None = None,
    price: Decimal | None = None,
    quantity: int | None = None,
) -> Product:
    """Apply the provided changes; product and stock are committed together."""

    if quantity is not None and quantity < 0:
        raise DomainError("Stock quantity cannot be negative")

    products = ProductRepository(session, auto_commit=False)
    stocks = StockRepository(session, auto_commit=False)

    current = products.get(product_id)
    if current is None:
        raise NotFoundError("Product", product_id)

    if name is not None and name.lower() != current.name.lower():
        existing = products.get_by_name(name)
        if existing and existing.id != product_id:
            raise ConflictError("Product name is already in use")

    try:
        with transaction(session):
            product = products.update(
                replace(
                    current,
                    name=name if name is not None else current.name,
                    description=(
                        description if description is not None else current.description
                    ),
                    price=price if price is not None else current.price,
                )
            )
            stock = current.stock
            if quantity is not None:
                if stock is None:
                    stock = stocks.create(
                        Stock(id=None, product_id=product_id, quantity=quantity)
                    )
                else:
                    stock = stocks.update(replace(stock, quantity=quantity))
    except IntegrityError as exc:
        raise ConflictError("Product name is already in use") from exc

    return replace(product, stock=stock)
