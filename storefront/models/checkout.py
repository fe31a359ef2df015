"""Checkout models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class CheckoutStage(str, Enum):
    CART = "cart"
    CHECKOUT = "checkout"


class PaymentMethod(str, Enum):
    COD = "cod"
    DIGITAL = "digital"


class DigitalWallet(str, Enum):
    MOMO = "momo"
    ZALOPAY = "zalopay"
    VNPAY = "vnpay"


class OrderTotals(BaseModel):
    """Derived order totals, never stored"""
    subtotal: float = 0.0
    shipping_fee: float = 0.0
    discount_amount: float = 0.0
    final_total: float = 0.0


class CheckoutDecision(BaseModel):
    """Result of asking the checkout gate to proceed"""
    session_id: str
    allowed: bool
    stage: CheckoutStage
    redirect_to: str
    message: Optional[str] = None


class PlaceOrderRequest(BaseModel):
    """Order form submitted from the checkout page"""
    payment_method: Optional[PaymentMethod] = PaymentMethod.COD
    digital_wallet: Optional[DigitalWallet] = None
    notes: str = Field(default="", max_length=1000)


class PlaceOrderResponse(BaseModel):
    """Response from placing an order"""
    session_id: str
    success: bool
    order_id: Optional[str] = None
    redirect_to: Optional[str] = None
    totals: Optional[OrderTotals] = None
    errors: dict[str, str] = {}
    error_message: Optional[str] = None
