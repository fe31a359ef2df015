"""Cart models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional

from .product import Product
from .coupon import CouponView
from .checkout import OrderTotals


class CartLineItem(BaseModel):
    """One product entry in the cart"""
    product: Product
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity"""
    quantity: int


class CartLineView(BaseModel):
    """Cart line as returned to the client"""
    product_id: str
    product_name: str
    unit_price: float
    quantity: int
    stock: int
    line_total: float


class CartView(BaseModel):
    """Cart contents with derived totals"""
    items: list[CartLineView] = []
    total_items: int = 0
    totals: OrderTotals
    coupon: CouponView
    formatted: dict[str, str] = {}


class CartResponse(BaseModel):
    """Cart API response"""
    session_id: str
    cart: CartView
    message: Optional[str] = None
