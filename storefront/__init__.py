"""
Storefront Core Module

This package contains the cart state engine of the storefront demo:
- db: Redis client and fixed storage keys
- cart: Cart store, line items, persistence adapter
- catalog: Read-only product lookup
- checkout: Simulated checkout validation
- i18n: Localized user-facing messages

Note: Imports are lazy so that importing the package never touches
the storage medium or the environment.
"""

__all__ = [
    "CartStore",
    "Catalog",
    "CheckoutService",
    "checkout",
    "get_default_catalog",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartStore":
        from storefront.cart import CartStore
        return CartStore
    if name == "Catalog":
        from storefront.catalog import Catalog
        return Catalog
    if name == "get_default_catalog":
        from storefront.catalog import get_default_catalog
        return get_default_catalog
    if name == "CheckoutService":
        from storefront.checkout import CheckoutService
        return CheckoutService
    if name == "checkout":
        from storefront.checkout import checkout
        return checkout
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
