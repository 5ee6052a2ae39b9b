"""Domain entity representing a user role."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Role:
    """A named role that can be assigned to users."""

    id: int | None
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Role"]
