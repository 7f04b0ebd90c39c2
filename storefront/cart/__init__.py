"""Cart package: models, storage, store, presenter, and widget facade."""
from .models import EMPTY_ROW, Cart, CartRow, LineItem, OrderSummary
from .storage import CartStorage, InMemoryCartStorage, RedisCartStorage, get_cart_storage
from .service import CartStore
from .presenter import CartPresenter, CartState
from .checkout import CheckoutConfirmed, CheckoutRejected, checkout
from .widget import CartWidget, get_cart_widget

__all__ = [
    "EMPTY_ROW",
    "Cart",
    "CartRow",
    "LineItem",
    "OrderSummary",
    "CartStorage",
    "InMemoryCartStorage",
    "RedisCartStorage",
    "get_cart_storage",
    "CartStore",
    "CartPresenter",
    "CartState",
    "CheckoutConfirmed",
    "CheckoutRejected",
    "checkout",
    "CartWidget",
    "get_cart_widget",
]
