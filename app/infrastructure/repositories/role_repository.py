"""Persistence layer for roles data."""

from collections.abc import Sequence

from sqlalchemy import func

from app.domain.entities import Role
from app.infrastructure.models import RoleModel

from .base import SqlAlchemyRepository


class RoleRepository(SqlAlchemyRepository):
    """Provide CRUD operations for role entities."""

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[Role]:
        query = (
            self.session.query(RoleModel)
            .order_by(RoleModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, role_id: int) -> Role | None:
        model = self.session.get(RoleModel, role_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.name) == name.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, role: Role) -> Role:
        model = RoleModel(name=role.name)
        self._save(model)
        return self._to_entity(model)

    def update(self, role: Role) -> Role:
        model = self.session.get(RoleModel, role.id)
        if model is None:
            msg = f"Role with id {role.id} not found"
            raise ValueError(msg)
        model.name = role.name
        self._save(model)
        return self._to_entity(model)

    def delete(self, role_id: int) -> None:
        model = self.session.get(RoleModel, role_id)
        if model is None:
            msg = f"Role with id {role_id} not found"
            raise ValueError(msg)
        self._remove(model)

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["RoleRepository"]
