"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime

from .role import Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    name: str
    email: str
    password: str
    roles: list[Role] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, name: str) -> bool:
        """Return ``True`` when one of the user's roles is called ``name``."""

        return any(role.name.lower() == name.lower() for role in self.roles)

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role("admin")
