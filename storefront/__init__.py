"""
Storefront Cart Core

This package contains the cart widget core:
- cart: line items, durable slot, store, presenter, checkout
- catalog: featured product fixture
- db: Upstash Redis client
- routers: FastAPI view layer

Note: Imports are lazy so the cart core can be used without the web stack.
"""

__all__ = [
    "get_cart_widget",
    "get_redis_sync",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "get_cart_widget":
        from storefront.cart import get_cart_widget
        return get_cart_widget
    elif name == "get_redis_sync":
        from storefront.db import get_redis_sync
        return get_redis_sync
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
