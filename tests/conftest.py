"""Shared pytest fixtures for storefront tests."""

import json
from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.core.session import StorefrontSession, session_manager
from storefront.main import app
from storefront.models.auth import User
from storefront.models.product import Product
from storefront.routes.deps import get_backend_client
from storefront.services.backend_client import BackendClient

BACKEND_URL = "http://backend.test/api"


def _ok(data=None, message: str = "OK", status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json={"status": "success", "message": message, "data": data})


def _fail(message: str, status_code: int, status: str = "fail") -> httpx.Response:
    return httpx.Response(status_code, json={"status": status, "message": message})


class FakeBackend:
    """In-memory stand-in for the shop REST backend."""

    PAGE_SIZE = 2

    def __init__(self):
        self.products = {
            "1": {"MaSP": 1, "TenSP": "Áo thun", "GiaBan": 100000, "SoLuongTon": 5, "MaDanhMuc": 2},
            "2": {"MaSP": 2, "TenSP": "Quần jean", "GiaBan": 350000, "SoLuongTon": 2, "MaDanhMuc": 2},
            "3": {"MaSP": 3, "TenSP": "Mũ lưỡi trai", "GiaBan": 80000, "SoLuongTon": 0, "MaDanhMuc": 4},
        }
        self.users = {
            "khach@example.com": {
                "MaKH": "KH001",
                "Email": "khach@example.com",
                "HoTen": "Nguyễn Văn A",
                "MaVaiTro": 3,
                "SoDienThoai": "0901234567",
                "DiaChi": "12 Lê Lợi, Quận 1",
            },
            "moi@example.com": {
                "MaKH": "KH002",
                "Email": "moi@example.com",
                "HoTen": "Trần Thị B",
                "MaVaiTro": 3,
            },
            "admin@example.com": {
                "MaNV": "NV001",
                "Email": "admin@example.com",
                "HoTen": "Quản Trị",
                "MaVaiTro": 1,
                "TenVaiTro": "admin",
            },
        }
        self.orders = [
            self._order(1001, "Lê Minh", "0911000111", "ChoXacNhan"),
            self._order(1002, "Phạm Hoa", "0922000222", "ChoXacNhan"),
            self._order(1003, "Lê Thu", "0933000333", "DangXuLy"),
            self._order(1004, "Võ Nam", "0944000444", "DaHuy"),
        ]
        self.created_orders: list[dict] = []
        self.status_updates: list[tuple[int, dict]] = []
        self.requests: list[httpx.Request] = []
        self.fail_orders = False
        self.fail_listing = False
        self.fail_logout = False

    @staticmethod
    def _order(order_id: int, recipient: str, phone: str, status: str) -> dict:
        return {
            "MaDonHang": order_id,
            "MaKH": "KH001",
            "TenKhachHang": recipient,
            "TenNguoiNhan": recipient,
            "SoDienThoaiNhan": phone,
            "EmailNguoiNhan": "",
            "DiaChiGiaoHang": "Hà Nội",
            "NgayDatHang": "2024-03-05T14:07:00.000Z",
            "TongTienSanPham": 200000,
            "PhiVanChuyen": 30000,
            "GiamGia": 0,
            "TongThanhToan": 230000,
            "PhuongThucThanhToan": "cod",
            "TrangThaiThanhToan": "ChuaThanhToan",
            "TrangThaiDonHang": status,
            "ChiTietDonHang": [{
                "MaChiTietDH": order_id * 10,
                "MaDonHang": order_id,
                "MaSP": 1,
                "TenSP": "Áo thun",
                "HinhAnhChinhURL": "",
                "SoLuong": 2,
                "DonGia": 100000,
                "ThanhTien": 200000,
            }],
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        body = json.loads(request.content) if request.content else {}

        if path == "/auth/login" and request.method == "POST":
            user = self.users.get(body.get("email"))
            if not user or body.get("password") != "secret":
                return _fail("Email hoặc mật khẩu không đúng", 401)
            return _ok({"token": f"token-{user['Email']}", "user": user})

        if path == "/auth/logout":
            if self.fail_logout:
                return _fail("Lỗi máy chủ", 500, status="error")
            return _ok()

        if path == "/auth/profile":
            auth = request.headers.get("Authorization", "")
            email = auth.removeprefix("Bearer token-")
            if email not in self.users:
                return _fail("Unauthorized", 401)
            return _ok(self.users[email])

        if path.startswith("/san-pham/"):
            product = self.products.get(path.rsplit("/", 1)[-1])
            if not product:
                return _fail("Không tìm thấy sản phẩm", 404)
            return _ok(product)

        if path == "/don-hang" and request.method == "POST":
            if self.fail_orders:
                return _fail("Sản phẩm không đủ số lượng", 400)
            order_id = 2000 + len(self.created_orders)
            self.created_orders.append(body)
            placed = self._order(order_id, "Nguyễn Văn A", "0901234567", "ChoXacNhan")
            placed["MaKH"] = body.get("userId")
            self.orders.append(placed)
            return _ok({"MaDonHang": order_id}, status_code=201)

        if path == "/don-hang" and request.method == "GET":
            if self.fail_listing:
                return _fail("Lỗi máy chủ", 500, status="error")
            status = request.url.params.get("trangThai")
            page = int(request.url.params.get("page", "1"))
            rows = [o for o in self.orders if not status or o["TrangThaiDonHang"] == status]
            total_pages = max(1, -(-len(rows) // self.PAGE_SIZE))
            start = (page - 1) * self.PAGE_SIZE
            return _ok({
                "donhangs": rows[start:start + self.PAGE_SIZE],
                "pagination": {"page": page, "totalPages": total_pages, "total": len(rows)},
            })

        if path.startswith("/don-hang/") and request.method == "GET":
            order_id = int(path.rsplit("/", 1)[-1])
            order = next((o for o in self.orders if o["MaDonHang"] == order_id), None)
            if not order:
                return _fail("Đơn hàng không tồn tại.", 404)
            return _ok(order)

        if path.startswith("/don-hang/") and request.method == "PATCH":
            order_id = int(path.rsplit("/", 1)[-1])
            order = next((o for o in self.orders if o["MaDonHang"] == order_id), None)
            if not order:
                return _fail("Không tìm thấy đơn hàng", 404)
            self.status_updates.append((order_id, body))
            order["TrangThaiDonHang"] = body["status"]
            return _ok(order)

        return _fail("Not found", 404)

    def requests_to(self, method: str, path_prefix: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path.removeprefix("/api").startswith(path_prefix)
        ]


@pytest.fixture(autouse=True)
def fresh_sessions():
    session_manager.sessions.clear()
    yield
    session_manager.sessions.clear()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend_client(backend) -> BackendClient:
    return BackendClient(BACKEND_URL, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def client(backend_client) -> TestClient:
    app.dependency_overrides[get_backend_client] = lambda: backend_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def session() -> StorefrontSession:
    return session_manager.create_session()


@pytest.fixture
def customer() -> User:
    return User(
        id="KH001",
        email="khach@example.com",
        full_name="Nguyễn Văn A",
        phone_number="0901234567",
        address="12 Lê Lợi, Quận 1",
    )


def make_product(product_id: str = "p1", price: float = 100000, stock: int = 5, **kwargs) -> Product:
    return Product(id=product_id, name=kwargs.pop("name", f"Product {product_id}"),
                   price=price, stock=stock, **kwargs)



def session_headers(client: TestClient, session_id: Optional[str] = None) -> dict[str, str]:
    if session_id is None:
        session_id = client.post("/api/session").json()["session_id"]
    return {"X-Session-Id": session_id}


@pytest.fixture
def headers(client) -> dict[str, str]:
    return session_headers(client)


@pytest.fixture
def login(client):
    def _login(headers: dict[str, str], email: str = "khach@example.com", password: str = "secret"):
        return client.post("/api/auth/login", json={"email": email, "password": password}, headers=headers)
    return _login
