"""Catalog package: products and read-only lookup."""
from .models import Product
from .sample import SAMPLE_PRODUCTS
from .service import Catalog, get_default_catalog

__all__ = [
    "Product",
    "Catalog",
    "SAMPLE_PRODUCTS",
    "get_default_catalog",
]
