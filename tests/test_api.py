"""Tests for API endpoints"""
import pytest
from fastapi.testclient import TestClient

from api.index import app
from storefront.routers.webapp.cart import get_widget


@pytest.fixture
def client(widget):
    """Test client bound to an in-memory widget"""
    app.dependency_overrides[get_widget] = lambda: widget
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_empty_cart(client):
    response = client.get("/api/webapp/cart")

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "empty"
    assert data["rows"][0]["is_empty_marker"] is True


def test_add_selection(client):
    response = client.post("/api/webapp/cart/add", json={"variant": "blue"})

    assert response.status_code == 200
    data = response.json()
    assert data["notice"] == "Product added to cart!"
    assert data["open_modal"] is True
    assert data["rows"][0]["display_variant"] == "Blue"
    assert data["display"]["total"] == "$35.00"


def test_add_item(client):
    response = client.post("/api/webapp/cart/items", json={
        "product_id": "p1",
        "name": "Pillow",
        "unit_price": 60,
        "variant": "gray",
    })

    assert response.status_code == 200
    assert response.json()["display"]["shipping"] == "FREE"


def test_add_invalid_item(client):
    response = client.post("/api/webapp/cart/items", json={
        "product_id": "p1",
        "name": "Pillow",
        "unit_price": -5,
        "variant": "gray",
    })

    assert response.status_code == 400
    assert "unit_price" in response.json()["detail"]


def test_remove_item(client):
    client.post("/api/webapp/cart/add", json={"variant": "blue"})
    client.post("/api/webapp/cart/add", json={"variant": "pink"})

    response = client.delete("/api/webapp/cart/items/0")

    data = response.json()
    assert data["removed"] is True
    assert [r["display_variant"] for r in data["rows"]] == ["Pink"]


def test_remove_out_of_range(client):
    response = client.delete("/api/webapp/cart/items/5")

    assert response.status_code == 200
    assert response.json()["removed"] is False


def test_checkout(client):
    client.post("/api/webapp/cart/add", json={"quantity": 3})

    response = client.post("/api/webapp/cart/checkout")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Proceeding to checkout with 1 item(s). Total: $75.00"
    assert data["total"] == 75.0
    assert data["close_modal"] is True
    assert data["cart"]["state"] == "empty"


def test_checkout_empty_cart(client):
    response = client.post("/api/webapp/cart/checkout")

    assert response.status_code == 400
    assert response.json()["detail"] == "Your cart is empty!"
