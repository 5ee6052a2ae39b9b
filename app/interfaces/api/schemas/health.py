"""Health check schemas."""

from pydantic import BaseModel, Field


class HealthRead(BaseModel):
    status: str = Field(..., description="``ok`` when every configured backend answers")
    database: bool
    cache: bool | None = Field(
        default=None, description="``None`` when no cache is configured"
    )
