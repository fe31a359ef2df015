"""Product models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional


class Product(BaseModel):
    """Catalog product, read-only to the cart"""
    id: str
    name: str = ""
    description: str = ""
    price: float = Field(ge=0)
    stock: int = Field(ge=0)
    category: str = ""
    image_url: Optional[str] = None

    @classmethod
    def from_backend(cls, data: dict) -> "Product":
        """Map a backend SanPham record to a Product"""
        return cls(
            id=str(data.get("MaSP", data.get("id", ""))),
            name=data.get("TenSP", data.get("name", "")),
            description=data.get("MoTa") or "",
            price=data.get("GiaBan", data.get("price", 0)),
            stock=data.get("SoLuongTon", data.get("stock", 0)),
            category=str(data.get("TenDanhMuc") or data.get("MaDanhMuc") or ""),
            image_url=data.get("HinhAnhChinhURL"),
        )
