"""Order total calculation"""

from ..models.checkout import OrderTotals
from .coupons import CouponState, discount_amount


def calculate_totals(subtotal: float, coupon: CouponState, shipping_fee: float) -> OrderTotals:
    """
    Combine subtotal, shipping fee and coupon discount.

    final_total = subtotal + shipping_fee - discount_amount, where the
    discount is taken from the subtotal only.
    """
    if shipping_fee < 0:
        raise ValueError("Shipping fee must be non-negative")

    discount = discount_amount(subtotal, coupon)
    return OrderTotals(
        subtotal=subtotal,
        shipping_fee=shipping_fee,
        discount_amount=discount,
        final_total=subtotal + shipping_fee - discount,
    )
