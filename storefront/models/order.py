"""Administrative order models"""

from pydantic import BaseModel
from typing import Optional
from enum import Enum


class OrderStatus(str, Enum):
    AWAITING_CONFIRMATION = "ChoXacNhan"
    PROCESSING = "DangXuLy"
    CONFIRMED = "DaXacNhan"
    SHIPPING = "DangGiaoHang"
    COMPLETED = "DaHoanThanh"
    CANCELLED = "DaHuy"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    def can_transition_to(self, target: "OrderStatus") -> bool:
        return target in ALLOWED_TRANSITIONS[self]


STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.AWAITING_CONFIRMATION: "Chờ xác nhận",
    OrderStatus.PROCESSING: "Đang xử lý",
    OrderStatus.CONFIRMED: "Đã xác nhận",
    OrderStatus.SHIPPING: "Đang giao hàng",
    OrderStatus.COMPLETED: "Đã hoàn thành",
    OrderStatus.CANCELLED: "Đã hủy",
}

# Forward-only; terminal statuses have no outgoing edge
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.AWAITING_CONFIRMATION: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPING, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPING: frozenset({OrderStatus.COMPLETED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class AdminOrder(BaseModel):
    """Order row as shown in the admin console"""
    order_id: int
    customer_id: Optional[str] = None
    customer_name: str = ""
    recipient_name: str = ""
    recipient_phone: str = ""
    recipient_email: str = ""
    shipping_address: str = ""
    ordered_at: Optional[str] = None
    items_total: float = 0.0
    shipping_fee: float = 0.0
    discount: float = 0.0
    grand_total: float = 0.0
    payment_method: str = ""
    payment_status: str = ""
    status: OrderStatus

    @classmethod
    def from_backend(cls, data: dict) -> "AdminOrder":
        """Map a backend DonHang record"""
        return cls(
            order_id=data["MaDonHang"],
            customer_id=data.get("MaKH"),
            customer_name=data.get("TenKhachHang") or "",
            recipient_name=data.get("TenNguoiNhan") or "",
            recipient_phone=data.get("SoDienThoaiNhan") or "",
            recipient_email=data.get("EmailNguoiNhan") or "",
            shipping_address=data.get("DiaChiGiaoHang") or "",
            ordered_at=data.get("NgayDatHang"),
            items_total=data.get("TongTienSanPham") or 0,
            shipping_fee=data.get("PhiVanChuyen") or 0,
            discount=data.get("GiamGia") or 0,
            grand_total=data.get("TongThanhToan") or 0,
            payment_method=data.get("PhuongThucThanhToan") or "",
            payment_status=data.get("TrangThaiThanhToan") or "",
            status=OrderStatus(data["TrangThaiDonHang"]),
        )


class AdminOrderView(AdminOrder):
    """Order row with display strings"""
    status_label: str = ""
    formatted_total: str = ""
    formatted_date: str = ""


class OrderPage(BaseModel):
    """One page of orders plus the local filter state"""
    session_id: str
    page: int
    total_pages: int
    status_filter: Optional[OrderStatus] = None
    search_term: str = ""
    orders: list[AdminOrderView] = []


class StatusUpdateRequest(BaseModel):
    """Request to move an order forward"""
    status: OrderStatus
    admin_note: Optional[str] = None


class RejectOrderRequest(BaseModel):
    """Request to cancel an order awaiting confirmation"""
    admin_note: Optional[str] = None


class OrderActionResponse(BaseModel):
    """Response from an administrative order action"""
    session_id: str
    success: bool
    order_id: int
    status: Optional[OrderStatus] = None
    message: Optional[str] = None


class OrderLine(BaseModel):
    """One product line of a placed order"""
    product_id: int
    product_name: str = ""
    image_url: Optional[str] = None
    quantity: int
    unit_price: float
    line_total: float

    @classmethod
    def from_backend(cls, data: dict) -> "OrderLine":
        """Map a backend ChiTietDonHang record"""
        return cls(
            product_id=data["MaSP"],
            product_name=data.get("TenSP") or "",
            image_url=data.get("HinhAnhChinhURL") or None,
            quantity=data.get("SoLuong") or 0,
            unit_price=data.get("DonGia") or 0,
            line_total=data.get("ThanhTien") or 0,
        )


class OrderDetail(AdminOrderView):
    """Full order for the invoice page and the admin detail view"""
    customer_note: Optional[str] = None
    admin_note: Optional[str] = None
    updated_at: Optional[str] = None
    items: list[OrderLine] = []
    formatted_items_total: str = ""
    formatted_shipping_fee: str = ""
    formatted_discount: str = ""
