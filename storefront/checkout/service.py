"""
Checkout Service

Simulated checkout: validates the customer form and the cart, then
pretends the payment went through and empties the cart. There is no
payment gateway and no I/O besides the cart's own persistence.

Checks run in a fixed order:
1. customer name and phone present
2. cart has at least one entry
"""
from typing import Mapping, Optional, Union

from storefront.cart.service import CartStore
from storefront.catalog.service import Catalog
from storefront.config import STOREFRONT_LANGUAGE
from storefront.errors import CHECKOUT_SUCCESS, ERROR_CART_EMPTY, ERROR_CUSTOMER_REQUIRED
from storefront.i18n import get_text
from storefront.logging import get_logger
from storefront.services.money import format_money

from .models import CheckoutResult, CustomerInfo

logger = get_logger(__name__)

CustomerInput = Union[CustomerInfo, Mapping, None]


def _to_customer(customer: CustomerInput) -> Optional[CustomerInfo]:
    if customer is None:
        return None
    if isinstance(customer, CustomerInfo):
        return customer
    try:
        return CustomerInfo.model_validate(dict(customer))
    except (TypeError, ValueError) as e:
        # ValidationError included; treated as missing customer fields
        logger.debug(f"Unusable customer form data: {e}")
        return None


def checkout(
    customer: CustomerInput,
    cart: CartStore,
    catalog: Catalog,
    lang: str = STOREFRONT_LANGUAGE,
) -> CheckoutResult:
    """
    Run the simulated checkout.

    Args:
        customer: Form fields (CustomerInfo or a plain mapping), may be None
        cart: Cart to validate and clear on success
        catalog: Catalog used to price the cart
        lang: Language of the result message

    Returns:
        CheckoutResult; ok=False leaves the cart untouched
    """
    info = _to_customer(customer)
    if info is None or not info.is_complete:
        return CheckoutResult(ok=False, message=get_text(ERROR_CUSTOMER_REQUIRED, lang))

    if cart.is_empty:
        return CheckoutResult(ok=False, message=get_text(ERROR_CART_EMPTY, lang))

    total = cart.total(catalog)
    message = get_text(CHECKOUT_SUCCESS, lang, total=format_money(total))
    cart.clear()

    logger.info(f"Simulated checkout completed, total {format_money(total)}")
    return CheckoutResult(ok=True, message=message)


class CheckoutService:
    """Checkout bound to one cart and catalog, as used by the checkout form."""

    def __init__(self, cart: CartStore, catalog: Catalog, lang: str = STOREFRONT_LANGUAGE):
        self.cart = cart
        self.catalog = catalog
        self.lang = lang

    def checkout(self, customer: CustomerInput) -> CheckoutResult:
        return checkout(customer, self.cart, self.catalog, lang=self.lang)
