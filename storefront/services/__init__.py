# Storefront services

from .backend_client import BackendClient, BackendError, StorefrontClientError
from .cart_store import CartStore
from .coupons import CouponEvaluator, CouponOutcome, CouponState, coupon_evaluator
from .totals import calculate_totals
from .checkout_gate import CheckoutGate, GateResult
from .notifications import Notifier
from .order_admin import OrderConsole

__all__ = [
    "BackendClient",
    "BackendError",
    "StorefrontClientError",
    "CartStore",
    "CouponEvaluator",
    "CouponOutcome",
    "CouponState",
    "coupon_evaluator",
    "calculate_totals",
    "CheckoutGate",
    "GateResult",
    "Notifier",
    "OrderConsole",
]
