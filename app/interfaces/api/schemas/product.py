"""Product schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

MAX_QUANTITY = 2**31 - 1
CENTS = Decimal("0.01")


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str = Field(default="", max_length=1000)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY, description="Initial units in stock")

    model_config = ConfigDict(str_strip_whitespace=True)


class ProductUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    quantity: int | None = Field(default=None, ge=0, le=MAX_QUANTITY)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ProductRead(BaseModel):
    id: int
    name: str
    description: str
    price: Decimal = Field(..., description='Sent as a string with two decimals, e.g. "19.90"')
    quantity: int
    created_at: str | None
    updated_at: str | None

    @field_serializer("price", when_used="json")
    def _price_as_string(self, value: Decimal) -> str:
        return str(value.quantize(CENTS))
