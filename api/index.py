"""
Storefront Cart - FastAPI Application

Single entry point for the product page's cart endpoints.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.cart import get_cart_widget
from storefront.logging import get_logger
from storefront.routers.webapp import router as webapp_router

logger = get_logger(__name__)

ALLOWED_ORIGINS = [o for o in os.environ.get("ALLOWED_ORIGINS", "*").split(",") if o]


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup: load the persisted cart once
    widget = get_cart_widget()
    logger.info(f"Cart widget ready with {widget.store.item_count} line(s)")
    yield


app = FastAPI(
    title="Storefront Cart",
    description="Cart state, totals and render model for the product page",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(webapp_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront-cart"}
