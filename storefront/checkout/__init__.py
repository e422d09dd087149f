"""Checkout package: customer input, result, and simulated checkout."""
from .models import CheckoutResult, CustomerInfo
from .service import CheckoutService, checkout

__all__ = [
    "CheckoutResult",
    "CustomerInfo",
    "CheckoutService",
    "checkout",
]
