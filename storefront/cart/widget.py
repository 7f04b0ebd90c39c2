"""Widget facade: view intents in, render models out."""
from dataclasses import dataclass, field
from typing import Any, Optional

from storefront.catalog import selection_to_item
from .checkout import CheckoutResult, checkout
from .presenter import CartPresenter
from .service import CartStore
from .storage import CartStorage, get_cart_storage

PRODUCT_ADDED_NOTICE = "Product added to cart!"


@dataclass(frozen=True)
class Notice:
    """Transient message for the view layer (toast)."""
    message: str
    level: str = "info"


@dataclass
class WidgetUpdate:
    view: dict
    notice: Optional[Notice] = None
    open_modal: bool = False
    close_modal: bool = False
    checkout: Optional[CheckoutResult] = None
    extra: dict = field(default_factory=dict)


class CartWidget:
    """Composes CartStore and CartPresenter behind the page's intents."""

    def __init__(self, store: CartStore, presenter: Optional[CartPresenter] = None):
        self.store = store
        self.presenter = presenter or CartPresenter()

    def view(self) -> dict:
        return self.presenter.render(self.store.cart)

    def add_selection(self, variant: Optional[str] = None, quantity: int = 1) -> WidgetUpdate:
        """Add the featured product in the selected color and open the cart."""
        self.store.add_item(selection_to_item(variant, quantity))
        return WidgetUpdate(view=self.view(), notice=Notice(PRODUCT_ADDED_NOTICE), open_modal=True)

    def add(self, **item: Any) -> WidgetUpdate:
        self.store.add_item(item)
        return WidgetUpdate(view=self.view(), notice=Notice(PRODUCT_ADDED_NOTICE), open_modal=True)

    def remove(self, index: int) -> WidgetUpdate:
        removed = self.store.remove_item(index)
        return WidgetUpdate(view=self.view(), extra={"removed": removed})

    def checkout(self) -> WidgetUpdate:
        """Mock checkout; the cart closes only when the order is confirmed."""
        result = checkout(self.store, self.presenter)
        return WidgetUpdate(
            view=self.view(),
            notice=Notice(result.message, level="info" if result.ok else "error"),
            close_modal=result.ok,
            checkout=result,
        )


# Singleton instance
_cart_widget: Optional[CartWidget] = None


def get_cart_widget(storage: Optional[CartStorage] = None) -> CartWidget:
    """Get CartWidget singleton, loading persisted state on first use."""
    global _cart_widget
    if _cart_widget is None:
        _cart_widget = CartWidget(CartStore(storage or get_cart_storage()))
    return _cart_widget


def reset_cart_widget() -> None:
    global _cart_widget
    _cart_widget = None
