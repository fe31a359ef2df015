"""
Storefront Application

Session-owned cart, coupon and checkout flow plus the admin order console,
backed by the shop's REST API.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

from .core.config import settings
from .core.session import session_manager
from .routes import (
    session_router,
    cart_router,
    checkout_router,
    auth_router,
    admin_orders_router,
    orders_router,
)
from .routes import deps

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront starting up...")
    logger.info(f"Backend URL: {settings.backend_api_url}")
    logger.info(f"Shipping fee: {settings.shipping_fee} {settings.currency}")

    yield

    logger.info("Storefront shutting down...")
    if deps.backend_client:
        await deps.backend_client.close()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Cart, checkout and order console for the shop frontend",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(session_router)
app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(auth_router)
app.include_router(admin_orders_router)
app.include_router(orders_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "Storefront API",
        "docs": "/docs",
        "endpoints": {
            "cart": "/api/cart",
            "checkout": "/api/checkout",
            "auth": "/api/auth",
            "orders": "/api/orders/{order_id}",
            "admin_orders": "/api/admin/orders",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "storefront",
        "backend_configured": settings.backend_configured,
        "active_sessions": len(session_manager.sessions),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
