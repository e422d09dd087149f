"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from storefront.catalog.models import Product
from storefront.services.money import multiply, to_float


class CartEvent(str, Enum):
    """State transitions reported to cart subscribers."""
    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"
    CLEARED = "cleared"


@dataclass(frozen=True)
class LineItem:
    """A cart entry resolved against the catalog. Derived, never stored."""
    id: str
    title: str
    price: Decimal
    image: str
    description: str
    qty: int

    @property
    def subtotal(self) -> Decimal:
        """Price for all units."""
        return multiply(self.price, self.qty)

    @classmethod
    def from_product(cls, product: Product, qty: int) -> "LineItem":
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            image=product.image,
            description=product.description,
            qty=qty,
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "price": to_float(self.price),
            "image": self.image,
            "description": self.description,
            "qty": self.qty,
            "subtotal": to_float(self.subtotal),
        }
