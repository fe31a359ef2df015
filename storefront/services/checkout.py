"""Checkout handoff to the backend order API"""

import logging
from typing import TYPE_CHECKING, Optional

from ..models.checkout import (
    OrderTotals,
    PaymentMethod,
    PlaceOrderRequest,
)
from .backend_client import BackendClient, BackendError
from .totals import calculate_totals

if TYPE_CHECKING:
    from ..core.session import StorefrontSession

logger = logging.getLogger(__name__)

NOT_REAL_PAYMENT_WARNING = (
    "Lưu ý đây không phải là thanh toán thật, dự án đang trong quá trình thử nghiệm"
)


class CheckoutError(Exception):
    """Order could not be placed; local state is unchanged"""

    def __init__(self, message: str, errors: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


def validate_order_form(session: "StorefrontSession", request: PlaceOrderRequest) -> dict[str, str]:
    """Field errors for the checkout form; empty when valid"""
    errors: dict[str, str] = {}

    if not request.payment_method:
        errors["payment_method"] = "Vui lòng chọn phương thức thanh toán"
    elif request.payment_method == PaymentMethod.DIGITAL and not request.digital_wallet:
        errors["digital_wallet"] = "Vui lòng chọn ví điện tử"

    user = session.user
    if not user or not user.phone_number:
        errors["phone_number"] = "Vui lòng cập nhật số điện thoại trong thông tin tài khoản"
    if not user or not user.address:
        errors["address"] = "Vui lòng cập nhật địa chỉ giao hàng trong thông tin tài khoản"

    return errors


def build_order_payload(session: "StorefrontSession", request: PlaceOrderRequest) -> dict:
    """Backend order body for the session's cart"""
    payload = {
        "userId": session.user.id if session.user else None,
        "items": [
            {"productId": line.product.id, "quantity": line.quantity}
            for line in session.cart.items
        ],
        "shippingAddress": (session.user.address if session.user else None) or "",
        "paymentMethod": request.payment_method.value,
        "notes": request.notes,
    }
    if request.payment_method == PaymentMethod.DIGITAL and request.digital_wallet:
        payload["digitalWallet"] = request.digital_wallet.value
    return payload


class CheckoutService:
    """Places orders for sessions that passed the checkout gate"""

    def __init__(self, client: BackendClient, shipping_fee: float):
        self.client = client
        self.shipping_fee = shipping_fee

    async def place_order(
        self,
        session: "StorefrontSession",
        request: PlaceOrderRequest,
    ) -> tuple[str, OrderTotals]:
        """
        Submit the cart as an order.

        On success the cart, coupon and gate are reset.

        Returns:
            Tuple of (order ID, totals charged)

        Raises:
            CheckoutError: form invalid or backend rejected the order
        """
        errors = validate_order_form(session, request)
        if errors:
            raise CheckoutError("Thông tin đặt hàng chưa hợp lệ", errors)

        totals = calculate_totals(session.cart.total_price, session.coupon, self.shipping_fee)
        payload = build_order_payload(session, request)

        try:
            data = await self.client.create_order(payload, token=session.token)
        except BackendError as e:
            logger.error(f"Checkout failed for session {session.session_id}: {e.message}")
            message = e.message or "Có lỗi xảy ra khi đặt hàng. Vui lòng thử lại"
            session.notifier.error(message)
            raise CheckoutError(message) from e

        order_id = data.get("id") or data.get("MaDonHang")
        if order_id is None:
            message = "Đặt hàng thất bại"
            session.notifier.error(message)
            raise CheckoutError(message)

        session.reset_shopping()
        session.notifier.success("Thanh toán thành công!")
        session.notifier.warning(NOT_REAL_PAYMENT_WARNING)
        logger.info(
            f"Order {order_id} created: {totals.final_total} - user {payload['userId']}"
        )
        return str(order_id), totals
