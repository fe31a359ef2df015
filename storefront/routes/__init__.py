# API Routes

from .session import router as session_router
from .cart import router as cart_router
from .checkout import router as checkout_router
from .auth import router as auth_router
from .admin_orders import router as admin_orders_router
from .orders import router as orders_router

__all__ = [
    "session_router",
    "cart_router",
    "checkout_router",
    "auth_router",
    "admin_orders_router",
    "orders_router",
]
