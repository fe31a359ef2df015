"""Administrative order listing and status transitions"""

import logging
from typing import Optional

from ..models.order import AdminOrder, OrderStatus
from .backend_client import BackendClient, BackendError
from .notifications import Notifier

logger = logging.getLogger(__name__)

DEFAULT_CANCEL_NOTE = "Đơn hàng đã bị hủy bởi quản trị viên"


class OrderConsole:
    """
    Order list for one administrator session.

    Holds the currently displayed page. Each fetch replaces the page when
    it resolves, so the last response to arrive wins. Keyword search runs
    over the loaded page only.
    """

    def __init__(self, client: BackendClient, notifier: Notifier):
        self.client = client
        self.notifier = notifier
        self.page = 1
        self.total_pages = 1
        self.status_filter: Optional[OrderStatus] = None
        self.search_term = ""
        self.orders: list[AdminOrder] = []
        self.loading = False

    def get_order(self, order_id: int) -> Optional[AdminOrder]:
        """Get an order from the loaded page"""
        return next((o for o in self.orders if o.order_id == order_id), None)

    async def load_page(
        self,
        page: Optional[int] = None,
        status: Optional[OrderStatus] = None,
        token: Optional[str] = None,
    ) -> bool:
        """
        Fetch a page of orders from the backend.

        Returns:
            True if the displayed page was replaced
        """
        if page is not None:
            self.page = max(1, page)
        self.status_filter = status
        self.loading = True

        try:
            data = await self.client.get_orders(
                page=self.page,
                status=status.value if status else None,
                token=token,
            )
            orders = [AdminOrder.from_backend(row) for row in data.get("donhangs") or []]
        except (BackendError, KeyError, ValueError) as e:
            logger.error(f"Error fetching orders page {self.page}: {e}")
            self.notifier.error("Đã xảy ra lỗi khi tải danh sách đơn hàng")
            return False
        finally:
            self.loading = False

        self.orders = orders
        self.total_pages = (data.get("pagination") or {}).get("totalPages") or 1
        return True

    def filter_orders(self, term: Optional[str] = None) -> list[AdminOrder]:
        """Filter the loaded page by recipient name, order ID or phone number"""
        if term is not None:
            self.search_term = term

        needle = self.search_term
        if not needle:
            return list(self.orders)

        lowered = needle.lower()
        return [
            order for order in self.orders
            if lowered in order.recipient_name.lower()
            or needle in str(order.order_id)
            or needle in order.recipient_phone
        ]

    async def transition(
        self,
        order_id: int,
        target: OrderStatus,
        admin_note: Optional[str] = None,
        token: Optional[str] = None,
        success_message: str = "Cập nhật trạng thái đơn hàng thành công",
    ) -> bool:
        """
        Move a loaded order forward to `target`.

        Illegal transitions are refused without contacting the backend.
        A successful update re-fetches the current page.
        """
        order = self.get_order(order_id)
        if not order:
            self.notifier.error(f"Không tìm thấy đơn hàng #{order_id}")
            return False

        if not order.status.can_transition_to(target):
            logger.warning(
                f"Refused transition for order {order_id}: {order.status.value} -> {target.value}"
            )
            self.notifier.error(
                f"Không thể chuyển đơn hàng từ '{order.status.label}' sang '{target.label}'"
            )
            return False

        try:
            await self.client.update_order_status(
                order_id,
                target.value,
                admin_note=admin_note,
                token=token,
            )
        except BackendError as e:
            logger.error(f"Error updating order {order_id} status: {e}")
            self.notifier.error("Đã xảy ra lỗi khi cập nhật trạng thái đơn hàng")
            return False

        self.notifier.success(success_message)
        await self.load_page(self.page, self.status_filter, token=token)
        return True

    async def approve(self, order_id: int, token: Optional[str] = None) -> bool:
        """Confirm an order awaiting confirmation"""
        return await self.transition(
            order_id,
            OrderStatus.PROCESSING,
            token=token,
            success_message="Đã xác nhận đơn hàng thành công",
        )

    async def reject(
        self,
        order_id: int,
        admin_note: Optional[str] = None,
        token: Optional[str] = None,
    ) -> bool:
        """Cancel an order with an attached note"""
        return await self.transition(
            order_id,
            OrderStatus.CANCELLED,
            admin_note=admin_note or DEFAULT_CANCEL_NOTE,
            token=token,
            success_message="Đã hủy đơn hàng thành công",
        )
