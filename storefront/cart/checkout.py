"""Mock checkout: confirm the order total and clear the cart."""
from dataclasses import dataclass
from typing import Union

from storefront.errors import ERROR_EMPTY_CART_CHECKOUT, EmptyCartCheckout
from storefront.logging import get_logger
from storefront.services.money import format_money
from .models import OrderSummary
from .presenter import CartPresenter
from .service import CartStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class CheckoutConfirmed:
    summary: OrderSummary
    item_count: int
    message: str

    ok = True


@dataclass(frozen=True)
class CheckoutRejected:
    reason: str
    message: str

    ok = False


CheckoutResult = Union[CheckoutConfirmed, CheckoutRejected]


def confirmation_message(item_count: int, summary: OrderSummary) -> str:
    return f"Proceeding to checkout with {item_count} item(s). Total: {format_money(summary.total)}"


def checkout(store: CartStore, presenter: CartPresenter) -> CheckoutResult:
    """
    Confirm the current cart and empty it.

    An empty cart is rejected without touching state or storage. The item
    count in the message is the number of lines, not units.
    """
    if store.is_empty:
        logger.info("Checkout rejected: cart is empty")
        return CheckoutRejected(reason=EmptyCartCheckout.code, message=ERROR_EMPTY_CART_CHECKOUT)

    cart = store.cart
    summary = presenter.summarize(cart)
    result = CheckoutConfirmed(
        summary=summary,
        item_count=len(cart),
        message=confirmation_message(len(cart), summary),
    )
    store.clear()
    logger.info(f"Checkout confirmed: {len(cart)} line(s), total {summary.total}")
    return result
