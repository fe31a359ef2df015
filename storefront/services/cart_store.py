"""Session-owned shopping cart"""

import logging
from typing import Iterator, Optional

from ..models.cart import CartLineItem
from ..models.product import Product

logger = logging.getLogger(__name__)


def _clamp(quantity: int, stock: int) -> int:
    return min(max(1, quantity), stock)


class CartStore:
    """
    Ordered collection of cart line items keyed by product id.

    Quantities always stay within [1, product.stock]. Totals are derived
    from the current lines on every read.
    """

    def __init__(self):
        self._lines: dict[str, CartLineItem] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(list(self._lines.values()))

    @property
    def items(self) -> list[CartLineItem]:
        """Snapshot of line items in insertion order"""
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def total_price(self) -> float:
        return sum(line.product.price * line.quantity for line in self._lines.values())

    def get_item(self, product_id: str) -> Optional[CartLineItem]:
        """Get a line item by product ID"""
        return self._lines.get(product_id)

    def add_item(self, product: Product, quantity: int = 1) -> Optional[CartLineItem]:
        """
        Add a product to the cart.

        An existing line grows by `quantity`, capped at stock. A new line
        starts at `quantity` clamped to [1, stock].

        Returns:
            The resulting line item, or None if the product is out of stock
        """
        if product.stock < 1:
            logger.info(f"Rejected add of out-of-stock product {product.id}")
            return None

        existing = self._lines.get(product.id)
        if existing:
            # Refresh the product so price/stock follow the catalog
            existing.product = product
            existing.quantity = _clamp(existing.quantity + quantity, product.stock)
            return existing

        line = CartLineItem(product=product, quantity=_clamp(quantity, product.stock))
        self._lines[product.id] = line
        return line

    def update_quantity(self, product_id: str, new_quantity: int) -> Optional[CartLineItem]:
        """Set a line's quantity; unknown product IDs are ignored"""
        line = self._lines.get(product_id)
        if not line:
            return None

        line.quantity = _clamp(new_quantity, line.product.stock)
        return line

    def remove_item(self, product_id: str) -> bool:
        """Remove a line item if present"""
        return self._lines.pop(product_id, None) is not None

    def clear_cart(self) -> None:
        """Remove all line items"""
        self._lines.clear()
