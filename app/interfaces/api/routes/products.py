"""Routes to manage the product catalog and stock levels."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.products import (
    create_product as create_product_uc,
    delete_product as delete_product_uc,
    get_product as get_product_uc,
    list_products as list_products_uc,
    update_product as update_product_uc,
)
from app.domain.entities import User
from app.domain.exceptions import DomainError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.presenters import present_product
from app.interfaces.api.routes_helpers import EntityId, Limit, Skip, to_http_exception
from app.interfaces.api.schemas import ProductCreate, ProductRead, ProductUpdate

router = APIRouter(prefix="/products", tags=["products"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    product_in: ProductCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Create a product together with its initial stock."""

    try:
        product = create_product_uc(
            db,
            name=product_in.name,
            description=product_in.description,
            price=product_in.price,
            quantity=product_in.quantity,
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_product(product)


@router.get("", response_model=list[ProductRead])
def list_products(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    products = list_products_uc(db, skip=skip, limit=limit)
    return [present_product(product) for product in products]


@router.get("/{product_id}", response_model=ProductRead)
def read_product(
    product_id: EntityId,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    try:
        product = get_product_uc(db, product_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_product(product)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: EntityId,
    product_in: ProductUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Update product fields and, when given, the stock quantity."""

    update_data = product_in.model_dump(exclude_unset=True)
    try:
        product = update_product_uc(db, product_id=product_id, **update_data)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_product(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: EntityId,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    try:
        delete_product_uc(db, product_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    logger.info("Deleted product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
