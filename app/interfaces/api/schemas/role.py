"""Role schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)

    model_config = ConfigDict(str_strip_whitespace=True)


class RoleUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class RoleRead(BaseModel):
    id: int
    name: str
    created_at: str | None
    updated_at: str | None
