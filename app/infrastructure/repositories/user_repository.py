"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func

from app.domain.entities import User
from app.infrastructure.models import RoleModel, UserModel

from .base import SqlAlchemyRepository
from .role_repository import RoleRepository


class UserRepository(SqlAlchemyRepository):
    """Provide CRUD operations for user entities."""

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .order_by(UserModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self._save(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self._save(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self._remove(model)

    def _apply_entity_to_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password = user.password
        role_ids = [role.id for role in user.roles if role.id is not None]
        if role_ids:
            roles = (
                self.session.query(RoleModel)
                .filter(RoleModel.id.in_(role_ids))
                .order_by(RoleModel.id)
                .all()
            )
        else:
            roles = []
        model.roles = roles

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            roles=[RoleRepository._to_entity(role) for role in model.roles],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["UserRepository"]
