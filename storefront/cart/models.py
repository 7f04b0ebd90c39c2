"""Cart models with Decimal-based pricing."""
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterator, List, Mapping, Optional

from storefront.errors import (
    ERROR_INVALID_NAME,
    ERROR_INVALID_PRODUCT_ID,
    ERROR_INVALID_QUANTITY,
    ERROR_INVALID_UNIT_PRICE,
    ERROR_INVALID_VARIANT,
    ERROR_MALFORMED_STATE,
    InvalidOperationInput,
    MalformedPersistedState,
)
from storefront.services.money import multiply, parse_decimal

# Persisted record field names, legacy layout first
_FIELD_ALIASES = {
    "product_id": ("id", "product_id"),
    "name": ("name",),
    "unit_price": ("price", "unit_price"),
    "variant": ("color", "variant"),
    "quantity": ("quantity",),
}


def _pick(data: Mapping[str, Any], field_name: str) -> Any:
    for key in _FIELD_ALIASES[field_name]:
        if key in data:
            return data[key]
    raise KeyError(field_name)


@dataclass
class LineItem:
    """One aggregated cart row for a (product_id, variant) pair."""
    product_id: str
    name: str
    unit_price: Decimal
    variant: str
    quantity: int = 1

    def __post_init__(self):
        if not isinstance(self.product_id, str) or not self.product_id.strip():
            raise InvalidOperationInput(ERROR_INVALID_PRODUCT_ID)
        if not isinstance(self.variant, str) or not self.variant.strip():
            raise InvalidOperationInput(ERROR_INVALID_VARIANT)
        if not isinstance(self.name, str):
            raise InvalidOperationInput(ERROR_INVALID_NAME)
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise InvalidOperationInput(ERROR_INVALID_QUANTITY)
        try:
            self.unit_price = parse_decimal(self.unit_price)
        except ValueError as e:
            raise InvalidOperationInput(ERROR_INVALID_UNIT_PRICE) from e
        # Totals are reported as floats at the API boundary
        if self.unit_price < 0 or not math.isfinite(float(self.unit_price)):
            raise InvalidOperationInput(ERROR_INVALID_UNIT_PRICE)

    @property
    def key(self) -> tuple:
        """Identity of the line inside a cart."""
        return (self.product_id, self.variant)

    @property
    def line_total(self) -> Decimal:
        """Unrounded total for all units."""
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to the persisted record layout."""
        return {
            "id": self.product_id,
            "name": self.name,
            "price": str(self.unit_price),
            "color": self.variant,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineItem":
        """
        Create from a persisted record or an item descriptor.

        Accepts both the legacy field names (id, price, color) and the
        descriptive ones (product_id, unit_price, variant).
        """
        return cls(
            product_id=_pick(data, "product_id"),
            name=_pick(data, "name"),
            unit_price=_pick(data, "unit_price"),
            variant=_pick(data, "variant"),
            quantity=_pick(data, "quantity"),
        )


@dataclass
class Cart:
    """Ordered sequence of line items, insertion order preserved."""
    items: List[LineItem] = field(default_factory=list)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_quantity(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self.items)

    def find(self, product_id: str, variant: str) -> Optional[LineItem]:
        return next(
            (item for item in self.items if item.key == (product_id, variant)),
            None,
        )

    def to_list(self) -> list:
        """Convert to the persisted JSON array."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data: Any) -> "Cart":
        """
        Build a cart from a decoded persisted value.

        Raises:
            MalformedPersistedState: If data is not a list of valid records
        """
        if not isinstance(data, list):
            raise MalformedPersistedState(f"{ERROR_MALFORMED_STATE}: expected a list")
        try:
            items = [LineItem.from_dict(record) for record in data]
        except (KeyError, TypeError, AttributeError, InvalidOperationInput) as e:
            raise MalformedPersistedState(f"{ERROR_MALFORMED_STATE}: {e}", raw_error=e) from e
        return _merge_duplicates(cls(items=items))


def _merge_duplicates(cart: Cart) -> Cart:
    """Fold repeated (product_id, variant) records into their first occurrence."""
    merged: List[LineItem] = []
    seen = {}
    for item in cart.items:
        existing = seen.get(item.key)
        if existing is None:
            seen[item.key] = item
            merged.append(item)
        else:
            existing.quantity += item.quantity
    cart.items = merged
    return cart


@dataclass(frozen=True)
class OrderSummary:
    """Derived totals, rounded to cents for display."""
    subtotal: Decimal
    shipping_cost: Decimal
    total: Decimal

    @property
    def free_shipping(self) -> bool:
        return self.shipping_cost == 0

    def to_dict(self) -> dict:
        return {
            "subtotal": str(self.subtotal),
            "shipping_cost": str(self.shipping_cost),
            "total": str(self.total),
            "free_shipping": self.free_shipping,
        }


@dataclass(frozen=True)
class CartRow:
    """One row of the render model."""
    display_name: str
    display_variant: str
    quantity: int
    line_total: Decimal
    remove_index: Optional[int]
    is_empty_marker: bool = False

    def to_dict(self) -> dict:
        return {
            "display_name": self.display_name,
            "display_variant": self.display_variant,
            "quantity": self.quantity,
            "line_total": str(self.line_total),
            "remove_index": self.remove_index,
            "is_empty_marker": self.is_empty_marker,
        }


EMPTY_CART_TEXT = "Your cart is empty"

EMPTY_ROW = CartRow(
    display_name=EMPTY_CART_TEXT,
    display_variant="",
    quantity=0,
    line_total=Decimal("0.00"),
    remove_index=None,
    is_empty_marker=True,
)
