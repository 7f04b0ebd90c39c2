"""
WebApp Cart Router

Cart endpoints for the product page. Every mutation responds with the
refreshed render model so the page can re-render in one round trip.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import CartWidget, get_cart_widget
from storefront.cart.widget import WidgetUpdate
from storefront.errors import InvalidOperationInput
from storefront.logging import get_logger
from storefront.services.money import to_float
from .models import AddItemRequest, AddSelectionRequest

logger = get_logger(__name__)

router = APIRouter(tags=["webapp-cart"])


def get_widget() -> CartWidget:
    return get_cart_widget()


def _format_update(update: WidgetUpdate) -> dict:
    return {
        **update.view,
        **update.extra,
        "notice": update.notice.message if update.notice else None,
        "open_modal": update.open_modal,
        "close_modal": update.close_modal,
    }


@router.get("/cart")
async def get_webapp_cart(widget: CartWidget = Depends(get_widget)):
    """Get the cart render model."""
    return widget.view()


@router.post("/cart/add")
async def add_selection_to_cart(request: AddSelectionRequest, widget: CartWidget = Depends(get_widget)):
    """Add the featured product in the selected color."""
    try:
        update = widget.add_selection(request.variant, request.quantity)
    except InvalidOperationInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _format_update(update)


@router.post("/cart/items")
async def add_item_to_cart(request: AddItemRequest, widget: CartWidget = Depends(get_widget)):
    """Add an arbitrary item descriptor."""
    try:
        update = widget.add(**request.model_dump())
    except InvalidOperationInput as e:
        logger.info(f"Rejected cart item: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return _format_update(update)


@router.delete("/cart/items/{index}")
async def remove_cart_item(index: int, widget: CartWidget = Depends(get_widget)):
    """Remove the line at index; out-of-range indices are ignored."""
    return _format_update(widget.remove(index))


@router.post("/cart/checkout")
async def checkout_cart(widget: CartWidget = Depends(get_widget)):
    """Mock checkout: returns the confirmation and empties the cart."""
    update = widget.checkout()
    result = update.checkout
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.message)
    return {
        "message": result.message,
        "item_count": result.item_count,
        "total": to_float(result.summary.total),
        "close_modal": update.close_modal,
        "cart": update.view,
    }
