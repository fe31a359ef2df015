"""Checkout API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.session import StorefrontSession
from ..models.checkout import (
    CheckoutDecision,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from ..services.checkout import CheckoutError, CheckoutService
from .deps import get_checkout_service, get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", response_model=CheckoutDecision)
async def request_checkout(session: StorefrontSession = Depends(get_session)):
    """
    Move from the cart to checkout.

    Unauthenticated sessions stay on the cart and are sent to the login page.
    """
    result = session.gate.request_checkout(session.is_authenticated)
    return CheckoutDecision(
        session_id=session.session_id,
        allowed=result.allowed,
        stage=result.stage,
        redirect_to=result.redirect_to,
        message=result.message,
    )


@router.post("/orders", response_model=PlaceOrderResponse)
async def place_order(
    request: PlaceOrderRequest,
    session: StorefrontSession = Depends(get_session),
    checkout_service: CheckoutService = Depends(get_checkout_service),
):
    """
    Submit the cart as an order.

    Requires a session that passed the checkout gate.
    """
    if not session.is_authenticated:
        session.gate.reset()
        raise HTTPException(status_code=401, detail="Login required")

    if not session.gate.in_checkout:
        logger.info(f"Order attempt outside checkout for session {session.session_id}")
        raise HTTPException(status_code=409, detail="Checkout not started")

    if session.cart.is_empty:
        raise HTTPException(status_code=400, detail="Cart is empty")

    try:
        order_id, totals = await checkout_service.place_order(session, request)
    except CheckoutError as e:
        return PlaceOrderResponse(
            session_id=session.session_id,
            success=False,
            errors=e.errors,
            error_message=e.message,
        )

    return PlaceOrderResponse(
        session_id=session.session_id,
        success=True,
        order_id=order_id,
        redirect_to=f"/invoice/{order_id}",
        totals=totals,
    )
