"""Cart API routes for the storefront"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends

from ..core.config import settings
from ..core.session import StorefrontSession
from ..models.cart import AddToCartRequest, UpdateCartItemRequest, CartResponse
from ..models.coupon import ApplyCouponRequest, CouponResponse
from ..models.product import Product
from ..services.backend_client import BackendClient, BackendError
from ..services.cart_view import build_cart_view, coupon_view
from ..services.coupons import coupon_evaluator
from .deps import get_backend_client, get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _cart_response(session: StorefrontSession, message: Optional[str] = None) -> CartResponse:
    return CartResponse(
        session_id=session.session_id,
        cart=build_cart_view(session, settings.shipping_fee),
        message=message,
    )


@router.get("", response_model=CartResponse)
async def get_cart(session: StorefrontSession = Depends(get_session)):
    """Get the session's cart with recomputed totals"""
    return _cart_response(session)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: StorefrontSession = Depends(get_session),
    client: BackendClient = Depends(get_backend_client),
):
    """Add a catalog product to the cart"""
    try:
        record = await client.get_product(request.product_id)
    except BackendError as e:
        if e.status_code == 404:
            raise HTTPException(status_code=404, detail="Product not found")
        logger.error(f"Product lookup failed for {request.product_id}: {e.message}")
        session.notifier.error("Không thể tải thông tin sản phẩm")
        raise HTTPException(status_code=502, detail=e.message)

    if not record:
        raise HTTPException(status_code=404, detail="Product not found")

    product = Product.from_backend(record)
    line = session.cart.add_item(product, request.quantity)
    if not line:
        session.notifier.error(f"{product.name} đã hết hàng")
        return _cart_response(session, message="Out of stock")

    session.notifier.success(f"Đã thêm {product.name} vào giỏ hàng")
    return _cart_response(session, message=f"Added {product.name} to cart")


@router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    session: StorefrontSession = Depends(get_session),
):
    """Update item quantity; unknown products are ignored"""
    session.cart.update_quantity(product_id, request.quantity)
    return _cart_response(session, message="Cart updated")


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    session: StorefrontSession = Depends(get_session),
):
    """Remove an item from the cart"""
    if session.cart.remove_item(product_id):
        session.notifier.success("Đã xóa sản phẩm khỏi giỏ hàng")
    return _cart_response(session, message="Item removed")


@router.delete("", response_model=CartResponse)
async def clear_cart(session: StorefrontSession = Depends(get_session)):
    """Clear all items from cart"""
    session.cart.clear_cart()
    session.notifier.success("Giỏ hàng đã được xóa!")
    return _cart_response(session, message="Cart cleared")


@router.post("/coupon", response_model=CouponResponse)
async def apply_coupon(
    request: ApplyCouponRequest,
    session: StorefrontSession = Depends(get_session),
):
    """Apply a coupon code to the cart"""
    outcome = coupon_evaluator.apply_coupon(session.coupon, request.code)
    if outcome.accepted:
        session.notifier.success(outcome.message)
    else:
        session.notifier.error(outcome.message)

    return CouponResponse(
        session_id=session.session_id,
        accepted=outcome.accepted,
        coupon=coupon_view(session),
        message=outcome.message,
    )
