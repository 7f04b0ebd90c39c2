"""
WebApp API Pydantic Models

Request models for the cart endpoints.
"""
from pydantic import BaseModel


# ==================== CART MODELS ====================

class AddSelectionRequest(BaseModel):
    variant: str | None = None  # defaults to the catalog's default color
    quantity: int = 1


class AddItemRequest(BaseModel):
    product_id: str
    name: str
    unit_price: float
    variant: str
    quantity: int = 1
