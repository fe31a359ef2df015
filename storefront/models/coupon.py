"""Coupon models for the storefront"""

from pydantic import BaseModel
from typing import Optional


class ApplyCouponRequest(BaseModel):
    """Request to apply a coupon code"""
    code: str


class CouponView(BaseModel):
    """Coupon state as returned to the client"""
    code: str = ""
    applied: bool = False
    discount_rate: float = 0.0


class CouponResponse(BaseModel):
    """Outcome of applying a coupon"""
    session_id: str
    accepted: bool
    coupon: CouponView
    message: Optional[str] = None
