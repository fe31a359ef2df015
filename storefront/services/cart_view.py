"""Client-facing views of session cart state"""

from typing import TYPE_CHECKING

from ..core.money import format_currency
from ..models.cart import CartLineView, CartView
from ..models.coupon import CouponView
from .totals import calculate_totals

if TYPE_CHECKING:
    from ..core.session import StorefrontSession


def coupon_view(session: "StorefrontSession") -> CouponView:
    return CouponView(
        code=session.coupon.code,
        applied=session.coupon.applied,
        discount_rate=session.coupon.discount_rate,
    )


def build_cart_view(session: "StorefrontSession", shipping_fee: float) -> CartView:
    """Cart lines plus totals recomputed from the current state"""
    cart = session.cart
    totals = calculate_totals(cart.total_price, session.coupon, shipping_fee)
    return CartView(
        items=[
            CartLineView(
                product_id=line.product.id,
                product_name=line.product.name,
                unit_price=line.product.price,
                quantity=line.quantity,
                stock=line.product.stock,
                line_total=line.line_total,
            )
            for line in cart.items
        ],
        total_items=cart.total_items,
        totals=totals,
        coupon=coupon_view(session),
        formatted={
            "subtotal": format_currency(totals.subtotal),
            "shipping_fee": format_currency(totals.shipping_fee),
            "discount_amount": format_currency(totals.discount_amount),
            "final_total": format_currency(totals.final_total),
        },
    )
