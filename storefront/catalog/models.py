"""Catalog models with Decimal-based pricing."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import to_decimal


class Product(BaseModel):
    """Immutable catalog product."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str
    price: Decimal
    image: str = ""
    description: str = ""

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("price must be non-negative")
        return v
