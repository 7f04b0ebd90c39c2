"""Cart presenter: render model and shipping policy."""
from decimal import Decimal
from enum import Enum
from typing import List

from storefront.services.money import ZERO, add, format_money, round_money
from .models import EMPTY_ROW, Cart, CartRow, OrderSummary

# Shipping policy
FREE_SHIPPING_THRESHOLD = Decimal("50.00")  # strictly above this ships free
FLAT_SHIPPING_COST = Decimal("10.00")

FREE_SHIPPING_LABEL = "FREE"


class CartState(str, Enum):
    """Cart lifecycle states."""
    EMPTY = "empty"
    NON_EMPTY = "non_empty"


def capitalize_variant(variant: str) -> str:
    """Upper-case the first character only ("royal blue" -> "Royal blue")."""
    if not variant:
        return ""
    return variant[0].upper() + variant[1:]


def format_shipping(cost: Decimal) -> str:
    return FREE_SHIPPING_LABEL if cost == 0 else format_money(cost)


class CartPresenter:
    """Pure derivations over a Cart; holds no state of its own."""

    def __init__(
        self,
        free_shipping_threshold: Decimal = FREE_SHIPPING_THRESHOLD,
        flat_shipping_cost: Decimal = FLAT_SHIPPING_COST,
    ):
        self.free_shipping_threshold = free_shipping_threshold
        self.flat_shipping_cost = flat_shipping_cost

    def shipping_policy(self, subtotal: Decimal) -> Decimal:
        """Free shipping strictly above the threshold, flat fee otherwise."""
        if subtotal > self.free_shipping_threshold:
            return ZERO
        return self.flat_shipping_cost

    def summarize(self, cart: Cart) -> OrderSummary:
        """
        Compute subtotal, shipping and total.

        Accumulation is unrounded; only the reported values are rounded
        to cents.
        """
        subtotal = ZERO
        for item in cart:
            subtotal = add(subtotal, item.line_total)
        shipping_cost = self.shipping_policy(subtotal)
        return OrderSummary(
            subtotal=round_money(subtotal),
            shipping_cost=round_money(shipping_cost),
            total=round_money(add(subtotal, shipping_cost)),
        )

    def render_rows(self, cart: Cart) -> List[CartRow]:
        """Rows for the view; an empty cart yields a single marker row."""
        if cart.is_empty:
            return [EMPTY_ROW]
        return [
            CartRow(
                display_name=item.name,
                display_variant=capitalize_variant(item.variant),
                quantity=item.quantity,
                line_total=round_money(item.line_total),
                remove_index=index,
            )
            for index, item in enumerate(cart)
        ]

    def state(self, cart: Cart) -> CartState:
        return CartState.EMPTY if cart.is_empty else CartState.NON_EMPTY

    def render(self, cart: Cart) -> dict:
        """Full render model consumed by the view layer."""
        summary = self.summarize(cart)
        return {
            "state": self.state(cart).value,
            "rows": [row.to_dict() for row in self.render_rows(cart)],
            "summary": summary.to_dict(),
            "display": {
                "subtotal": format_money(summary.subtotal),
                "shipping": format_shipping(summary.shipping_cost),
                "total": format_money(summary.total),
            },
            "item_count": len(cart),
            "total_quantity": cart.total_quantity,
        }
