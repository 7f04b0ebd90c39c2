"""
Catalog fixture for the product page.

The page sells a single featured product; the selected color is the
variant passed to the cart.
"""
from decimal import Decimal
from typing import Optional

FEATURED_PRODUCT = {
    "product_id": "mello-725i",
    "name": "MELLO DREAM 725i",
    "unit_price": Decimal("25.00"),
}

DEFAULT_VARIANT = "black"

# Display names shown next to the color picker
COLOR_NAMES = {
    "gray": "Gray",
    "pink": "Pink",
    "blue": "Royal Blue",
    "black": "Royal Black",
}


def color_label(variant: str) -> str:
    """Marketing name for a color, falling back to the raw value."""
    return COLOR_NAMES.get(variant, variant)


def selection_to_item(variant: Optional[str] = None, quantity: int = 1) -> dict:
    """Add-to-cart descriptor for the featured product in the selected color."""
    return {
        **FEATURED_PRODUCT,
        "variant": variant or DEFAULT_VARIANT,
        "quantity": quantity,
    }
