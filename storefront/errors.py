"""
Common Message Keys

Centralized i18n keys for user-facing checkout messages, so the
validator and the tests never spell them twice.
"""

# Checkout rejections
ERROR_CUSTOMER_REQUIRED = "checkout.customer_required"
ERROR_CART_EMPTY = "checkout.cart_empty"

# Checkout success
CHECKOUT_SUCCESS = "checkout.success"

# Result titles shown above the message
RESULT_TITLE_OK = "checkout.title_ok"
RESULT_TITLE_ERROR = "checkout.title_error"
