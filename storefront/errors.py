"""
Cart Errors

Centralized error messages and exception types for the cart core.
"""

from typing import Any

# User-facing notices
ERROR_EMPTY_CART_CHECKOUT = "Your cart is empty!"

# Input validation
ERROR_INVALID_PRODUCT_ID = "product_id must be a non-empty string"
ERROR_INVALID_VARIANT = "variant must be a non-empty string"
ERROR_INVALID_NAME = "name must be a string"
ERROR_INVALID_QUANTITY = "quantity must be a positive integer"
ERROR_INVALID_UNIT_PRICE = "unit_price must be a non-negative number"

# Persistence
ERROR_PERSISTENCE_UNAVAILABLE = "Cart storage unavailable"
ERROR_MALFORMED_STATE = "Persisted cart is malformed"


class CartError(Exception):
    """Base error for cart operations."""

    code: str = "cart_error"

    def __init__(self, message: str, code: str | None = None, raw_error: Any = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.raw_error = raw_error


class InvalidOperationInput(CartError, ValueError):
    """Rejected input to a cart mutation (bad price, quantity, or identifiers)."""

    code = "invalid_input"


class MalformedPersistedState(CartError):
    """Persisted cart data is unparsable or structurally invalid."""

    code = "malformed_state"


class PersistenceError(CartError):
    """Durable slot read or write failed (quota, storage disabled, network)."""

    code = "persistence_failed"


class EmptyCartCheckout(CartError):
    """Checkout was requested with no items in the cart."""

    code = "empty_cart"
