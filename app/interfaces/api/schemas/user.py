"""User schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8, max_length=128)

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    """Outward representation of a user; the password hash is never part of it."""

    id: int
    name: str
    email: str
    roles: list[str]
    created_at: str | None
    updated_at: str | None


class RoleAssignment(BaseModel):
    role_id: int = Field(..., ge=1, le=2**31 - 1)
