"""Auth models for the storefront"""

from pydantic import BaseModel
from typing import Optional

CUSTOMER_ROLE_ID = 3


class User(BaseModel):
    """Logged-in user"""
    id: str
    email: str
    full_name: str = ""
    role: str = "customer"
    phone_number: Optional[str] = None
    address: Optional[str] = None

    @property
    def is_staff(self) -> bool:
        return self.role != "customer"

    @classmethod
    def from_backend(cls, data: dict) -> "User":
        """Map a backend KhachHang/NhanVien record"""
        role = "customer"
        if data.get("MaVaiTro"):
            role = data.get("TenVaiTro") or (
                "customer" if data["MaVaiTro"] == CUSTOMER_ROLE_ID else "admin"
            )
        return cls(
            id=str(data.get("MaKH") or data.get("MaNV") or ""),
            email=data.get("Email") or "",
            full_name=data.get("HoTen") or "",
            role=role,
            phone_number=data.get("SoDienThoai") or None,
            address=data.get("DiaChi") or None,
        )


class LoginRequest(BaseModel):
    """Login form"""
    email: str
    password: str


class AuthResponse(BaseModel):
    """Response from login/logout/me"""
    session_id: str
    success: bool
    user: Optional[User] = None
    message: Optional[str] = None
