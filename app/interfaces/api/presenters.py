"""Map domain entities to the response schemas exposed by the API.

Presenters are pure: they only reshape data already loaded by a use case and
never reach back into repositories.
"""

from app.domain.entities import Product, Role, User
from app.interfaces.api.schemas import ProductRead, RoleRead, UserRead
from app.utils import format_timestamp


def present_user(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        name=user.name,
        email=user.email,
        roles=[role.name for role in user.roles],
        created_at=format_timestamp(user.created_at),
        updated_at=format_timestamp(user.updated_at),
    )


def present_role(role: Role) -> RoleRead:
    return RoleRead(
        id=role.id,
        name=role.name,
        created_at=format_timestamp(role.created_at),
        updated_at=format_timestamp(role.updated_at),
    )


def present_product(product: Product) -> ProductRead:
    """Flatten the stock row into the product's ``quantity``."""

    return ProductRead(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        quantity=product.quantity,
        created_at=format_timestamp(product.created_at),
        updated_at=format_timestamp(product.updated_at),
    )


__all__ = ["present_product", "present_role", "present_user"]
