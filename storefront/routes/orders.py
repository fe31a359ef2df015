"""Order detail routes for the invoice page"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from ..core.money import format_currency
from ..core.session import StorefrontSession
from ..models.order import AdminOrder, OrderDetail, OrderLine
from ..services.backend_client import BackendClient, BackendError
from .admin_orders import order_view
from .deps import get_backend_client, get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def _order_detail(record: dict) -> OrderDetail:
    order = AdminOrder.from_backend(record)
    return OrderDetail(
        **order_view(order).model_dump(),
        customer_note=record.get("GhiChuKhachHang"),
        admin_note=record.get("GhiChuQuanTri"),
        updated_at=record.get("NgayCapNhat"),
        items=[OrderLine.from_backend(line) for line in record.get("ChiTietDonHang") or []],
        formatted_items_total=format_currency(order.items_total),
        formatted_shipping_fee=format_currency(order.shipping_fee),
        formatted_discount=format_currency(order.discount),
    )


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order(
    order_id: int,
    session: StorefrontSession = Depends(get_session),
    client: BackendClient = Depends(get_backend_client),
):
    """
    Get one order.

    Customers may only read their own orders; admins and sellers read any.
    """
    if not session.is_authenticated:
        raise HTTPException(status_code=401, detail="Login required")

    try:
        record = await client.get_order(order_id, token=session.token)
    except BackendError as e:
        logger.warning(f"Order {order_id} lookup failed: {e.message}")
        status_code = e.status_code if e.status_code in (401, 403, 404) else 502
        raise HTTPException(status_code=status_code, detail=e.message)

    if not record:
        raise HTTPException(status_code=404, detail="Order not found")

    user = session.user
    if not user.is_staff and str(record.get("MaKH") or "") != user.id:
        logger.info(f"User {user.id} denied access to order {order_id}")
        raise HTTPException(status_code=403, detail="Not your order")

    return _order_detail(record)
