"""Administrative order routes"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from ..core.money import format_currency, format_datetime
from ..core.session import StorefrontSession
from ..models.order import (
    AdminOrder,
    AdminOrderView,
    OrderActionResponse,
    OrderPage,
    OrderStatus,
    RejectOrderRequest,
    StatusUpdateRequest,
)
from ..services.order_admin import OrderConsole
from .deps import get_order_console, require_staff

router = APIRouter(prefix="/api/admin/orders", tags=["Admin Orders"])


def order_view(order: AdminOrder) -> AdminOrderView:
    formatted_date = ""
    if order.ordered_at:
        try:
            formatted_date = format_datetime(order.ordered_at)
        except ValueError:
            formatted_date = order.ordered_at
    return AdminOrderView(
        **order.model_dump(),
        status_label=order.status.label,
        formatted_total=format_currency(order.grand_total),
        formatted_date=formatted_date,
    )


def _order_page(session: StorefrontSession, console: OrderConsole) -> OrderPage:
    return OrderPage(
        session_id=session.session_id,
        page=console.page,
        total_pages=console.total_pages,
        status_filter=console.status_filter,
        search_term=console.search_term,
        orders=[order_view(o) for o in console.filter_orders()],
    )


def _action_response(
    session: StorefrontSession,
    console: OrderConsole,
    order_id: int,
    ok: bool,
) -> OrderActionResponse:
    order = console.get_order(order_id)
    pending = session.notifier.pending
    return OrderActionResponse(
        session_id=session.session_id,
        success=ok,
        order_id=order_id,
        status=order.status if order else None,
        message=pending[-1].message if pending else None,
    )


@router.get("", response_model=OrderPage)
async def list_orders(
    page: int = Query(1, ge=1, description="Page number"),
    status: Optional[OrderStatus] = Query(None, description="Filter by status"),
    q: Optional[str] = Query(None, description="Search the loaded page"),
    session: StorefrontSession = Depends(require_staff),
    console: OrderConsole = Depends(get_order_console),
):
    """
    Load a page of orders.

    The keyword search only looks at orders on the fetched page.
    """
    await console.load_page(page, status, token=session.token)
    if q is not None:
        console.search_term = q
    return _order_page(session, console)


@router.post("/{order_id}/approve", response_model=OrderActionResponse)
async def approve_order(
    order_id: int,
    session: StorefrontSession = Depends(require_staff),
    console: OrderConsole = Depends(get_order_console),
):
    """Confirm an order awaiting confirmation"""
    ok = await console.approve(order_id, token=session.token)
    return _action_response(session, console, order_id, ok)


@router.post("/{order_id}/reject", response_model=OrderActionResponse)
async def reject_order(
    order_id: int,
    request: Optional[RejectOrderRequest] = None,
    session: StorefrontSession = Depends(require_staff),
    console: OrderConsole = Depends(get_order_console),
):
    """Cancel an order with an admin note"""
    note = request.admin_note if request else None
    ok = await console.reject(order_id, admin_note=note, token=session.token)
    return _action_response(session, console, order_id, ok)


@router.post("/{order_id}/status", response_model=OrderActionResponse)
async def update_order_status(
    order_id: int,
    request: StatusUpdateRequest,
    session: StorefrontSession = Depends(require_staff),
    console: OrderConsole = Depends(get_order_console),
):
    """Move an order forward one step"""
    ok = await console.transition(
        order_id,
        request.status,
        admin_note=request.admin_note,
        token=session.token,
    )
    return _action_response(session, console, order_id, ok)
