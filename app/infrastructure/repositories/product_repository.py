"""Persistence layer for products and their stock rows."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import func

from app.domain.entities import Product, Stock
from app.infrastructure.models import ProductModel, StockModel

from .base import SqlAlchemyRepository


class ProductRepository(SqlAlchemyRepository):
    """Provide CRUD operations for product entities.

    Stock rows are written through :class:`StockRepository`; this repository
    only reads them alongside the product.
    """

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[Product]:
        query = (
            self.session.query(ProductModel)
            .order_by(ProductModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, product_id: int) -> Product | None:
        model = self.session.get(ProductModel, product_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Product | None:
        model = (
            self.session.query(ProductModel)
            .filter(func.lower(ProductModel.name) == name.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, product: Product) -> Product:
        model = ProductModel()
        self._apply_entity_to_model(model, product)
        self._save(model)
        return self._to_entity(model)

    def update(self, product: Product) -> Product:
        model = self.session.get(ProductModel, product.id)
        if model is None:
            msg = f"Product with id {product.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, product)
        self._save(model)
        return self._to_entity(model)

    def delete(self, product_id: int) -> None:
        model = self.session.get(ProductModel, product_id)
        if model is None:
            msg = f"Product with id {product_id} not found"
            raise ValueError(msg)
        self._remove(model)

    @staticmethod
    def _apply_entity_to_model(model: ProductModel, product: Product) -> None:
        model.name = product.name
        model.description = product.description
        model.price = Decimal(product.price)

    @staticmethod
    def _to_entity(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            description=model.description or "",
            price=Decimal(model.price),
            stock=StockRepository._to_entity(model.stock) if model.stock else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class StockRepository(SqlAlchemyRepository):
    """Provide write access to the stock row of a product."""

    def get_by_product_id(self, product_id: int) -> Stock | None:
        model = self._get_model(product_id)
        return self._to_entity(model) if model else None

    def create(self, stock: Stock) -> Stock:
        model = StockModel(product_id=stock.product_id, quantity=stock.quantity)
        self._save(model)
        return self._to_entity(model)

    def update(self, stock: Stock) -> Stock:
        model = self._get_model(stock.product_id)
        if model is None:
            msg = f"Stock for product {stock.product_id} not found"
            raise ValueError(msg)
        model.quantity = stock.quantity
        self._save(model)
        return self._to_entity(model)

    def _get_model(self, product_id: int | None) -> StockModel | None:
        return self.session.query(StockModel).filter_by(product_id=product_id).first()

    @staticmethod
    def _to_entity(model: StockModel) -> Stock:
        return Stock(
            id=model.id,
            product_id=model.product_id,
            quantity=model.quantity,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["ProductRepository", "StockRepository"]
