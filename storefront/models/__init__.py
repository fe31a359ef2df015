# Storefront Models

from .product import Product
from .coupon import ApplyCouponRequest, CouponView, CouponResponse
from .checkout import (
    CheckoutStage,
    CheckoutDecision,
    DigitalWallet,
    OrderTotals,
    PaymentMethod,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from .cart import (
    CartLineItem,
    CartLineView,
    CartView,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from .order import (
    AdminOrder,
    AdminOrderView,
    OrderPage,
    OrderStatus,
    StatusUpdateRequest,
    RejectOrderRequest,
    OrderActionResponse,
    OrderDetail,
    OrderLine,
)
from .auth import User, LoginRequest, AuthResponse
from .notification import Notification, NotificationKind, NotificationsResponse

__all__ = [
    "Product",
    "ApplyCouponRequest",
    "CouponView",
    "CouponResponse",
    "CheckoutStage",
    "CheckoutDecision",
    "DigitalWallet",
    "OrderTotals",
    "PaymentMethod",
    "PlaceOrderRequest",
    "PlaceOrderResponse",
    "CartLineItem",
    "CartLineView",
    "CartView",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "AdminOrder",
    "AdminOrderView",
    "OrderPage",
    "OrderStatus",
    "StatusUpdateRequest",
    "RejectOrderRequest",
    "OrderActionResponse",
    "OrderDetail",
    "OrderLine",
    "User",
    "LoginRequest",
    "AuthResponse",
    "Notification",
    "NotificationKind",
    "NotificationsResponse",
]
