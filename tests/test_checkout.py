"""
Tests for checkout and the widget facade
"""

import json
import pytest
from decimal import Decimal

from storefront.cart import CheckoutConfirmed, CheckoutRejected, checkout
from storefront.cart.widget import Notice
from storefront.catalog import COLOR_NAMES, DEFAULT_VARIANT, color_label, selection_to_item


class TestCheckout:

    def test_checkout_with_items(self, store, storage, presenter, sample_item):
        """Scenario: confirmation carries the prior total, cart is emptied."""
        store.add_item(sample_item)

        result = checkout(store, presenter)

        assert isinstance(result, CheckoutConfirmed)
        assert result.ok
        assert result.summary.total == Decimal("35.00")
        assert result.message == "Proceeding to checkout with 1 item(s). Total: $35.00"
        assert store.is_empty
        assert json.loads(storage.load_raw()) == []

    def test_item_count_counts_lines(self, store, presenter, sample_item):
        store.add_item({**sample_item, "variant": "blue", "quantity": 2})
        store.add_item({**sample_item, "variant": "pink"})

        result = checkout(store, presenter)

        assert result.item_count == 2
        assert result.message == "Proceeding to checkout with 2 item(s). Total: $75.00"

    def test_checkout_empty_cart_rejected(self, store, storage, presenter):
        """Scenario: empty cart checkout changes nothing and writes nothing."""
        events = []
        store.subscribe(events.append)

        result = checkout(store, presenter)

        assert isinstance(result, CheckoutRejected)
        assert not result.ok
        assert result.reason == "empty_cart"
        assert result.message == "Your cart is empty!"
        assert storage.writes == 0
        assert events == []


class TestCatalog:

    def test_selection_defaults_to_black(self):
        item = selection_to_item()

        assert item["variant"] == DEFAULT_VARIANT == "black"
        assert item["product_id"] == "mello-725i"
        assert item["unit_price"] == Decimal("25.00")

    def test_color_labels(self):
        assert color_label("blue") == "Royal Blue"
        assert color_label("teal") == "teal"
        assert set(COLOR_NAMES) == {"gray", "pink", "blue", "black"}


class TestCartWidget:

    def test_add_selection(self, widget):
        """Scenario: single add from the product page."""
        update = widget.add_selection()

        assert update.open_modal
        assert update.notice.message == "Product added to cart!"
        assert update.view["display"] == {"subtotal": "$25.00", "shipping": "$10.00", "total": "$35.00"}

    def test_add_selection_three_times(self, widget):
        for _ in range(3):
            update = widget.add_selection("black")

        assert len(update.view["rows"]) == 1
        assert update.view["rows"][0]["quantity"] == 3
        assert update.view["display"]["shipping"] == "FREE"
        assert update.view["display"]["total"] == "$75.00"

    def test_remove(self, widget):
        widget.add_selection("blue")
        widget.add_selection("pink")

        update = widget.remove(0)

        assert update.extra == {"removed": True}
        assert [r["display_variant"] for r in update.view["rows"]] == ["Pink"]

    def test_remove_out_of_range(self, widget):
        update = widget.remove(3)

        assert update.extra == {"removed": False}
        assert update.view["rows"][0]["is_empty_marker"]

    def test_add_arbitrary_item(self, widget):
        update = widget.add(product_id="p9", name="Pillow", unit_price=12.5, variant="gray", quantity=2)

        assert update.view["display"]["subtotal"] == "$25.00"

    def test_checkout(self, widget):
        """Test a confirmed checkout empties the cart and closes it."""
        widget.add_selection()

        update = widget.checkout()

        assert update.checkout.ok
        assert update.close_modal
        assert not update.open_modal
        assert update.notice.message == "Proceeding to checkout with 1 item(s). Total: $35.00"
        assert update.view["state"] == "empty"

    def test_checkout_empty(self, widget):
        """Test a rejected checkout leaves the cart open."""
        update = widget.checkout()

        assert not update.checkout.ok
        assert not update.close_modal
        assert update.notice == Notice("Your cart is empty!", level="error")
