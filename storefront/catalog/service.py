"""
Catalog Lookup

Read-only product registry keyed by id. The cart engine only ever
reads from it.
"""
from typing import Iterable, Mapping, Optional, Union

from storefront.logging import get_logger

from .models import Product
from .sample import SAMPLE_PRODUCTS

logger = get_logger(__name__)


class Catalog:
    """Immutable list of products with id lookup."""

    def __init__(self, products: Iterable[Union[Product, Mapping]]):
        items = tuple(p if isinstance(p, Product) else Product(**p) for p in products)
        by_id: dict[str, Product] = {}
        for product in items:
            if product.id in by_id:
                raise ValueError(f"Duplicate product id in catalog: {product.id}")
            by_id[product.id] = product
        self._products = items
        self._by_id = by_id

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Resolve a product id, None when unknown."""
        return self._by_id.get(product_id)

    def all(self) -> tuple[Product, ...]:
        """All products in catalog order."""
        return self._products

    def search(self, query: str) -> list[Product]:
        """
        Products whose title or description contains query.

        Plain case-sensitive substring match; an empty query matches
        everything.
        """
        if not query:
            return list(self._products)
        return [p for p in self._products if query in p.title or query in p.description]

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __iter__(self):
        return iter(self._products)


_default_catalog: Optional[Catalog] = None


def get_default_catalog() -> Catalog:
    """Get the demo catalog singleton."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = Catalog(SAMPLE_PRODUCTS)
        logger.debug(f"Loaded demo catalog with {len(_default_catalog)} products")
    return _default_catalog
