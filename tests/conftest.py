"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from storefront.cart import CartPresenter, CartStore, CartWidget, InMemoryCartStorage
from storefront.cart.widget import reset_cart_widget


@pytest.fixture(autouse=True)
def _reset_widget_singleton():
    reset_cart_widget()
    yield
    reset_cart_widget()


@pytest.fixture
def storage():
    """Empty in-memory durable slot"""
    return InMemoryCartStorage()


@pytest.fixture
def store(storage):
    """Cart store over the in-memory slot"""
    return CartStore(storage)


@pytest.fixture
def presenter():
    return CartPresenter()


@pytest.fixture
def widget(store, presenter):
    return CartWidget(store, presenter)


@pytest.fixture
def sample_item():
    """Featured product descriptor, as the product page sends it"""
    return {
        "product_id": "mello-725i",
        "name": "MELLO DREAM 725i",
        "unit_price": 25.00,
        "variant": "black",
        "quantity": 1,
    }
