"""Coupon code evaluation"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


def _validated_rates(table: dict[str, float]) -> dict[str, float]:
    for code, rate in table.items():
        if not 0 <= rate < 1:
            raise ValueError(f"Discount rate for {code} must be in [0, 1), got {rate}")
    return {code.upper(): rate for code, rate in table.items()}


COUPON_RATES: dict[str, float] = _validated_rates({
    "DISCOUNT10": 0.10,
    "DISCOUNT20": 0.20,
})


@dataclass
class CouponState:
    """Coupon entered for the current cart"""
    code: str = ""
    applied: bool = False
    discount_rate: float = 0.0

    def reset(self) -> None:
        """Unlock the code field and drop any discount"""
        self.code = ""
        self.applied = False
        self.discount_rate = 0.0


@dataclass
class CouponOutcome:
    """Result of an apply attempt"""
    accepted: bool
    message: str
    discount_rate: float = 0.0


class CouponEvaluator:
    """Matches user-entered codes against the fixed coupon table"""

    def __init__(self, rates: Optional[dict[str, float]] = None):
        self.rates = _validated_rates(rates) if rates is not None else COUPON_RATES

    def lookup(self, code: str) -> Optional[float]:
        """Get the discount rate for a code, case-insensitive"""
        return self.rates.get(code.strip().upper())

    def apply_coupon(self, state: CouponState, code: str) -> CouponOutcome:
        """
        Apply a code to the coupon state.

        A match locks the state with the matched rate. Unknown codes and
        attempts on an already-applied coupon leave the state unchanged.
        """
        if state.applied:
            return CouponOutcome(
                accepted=False,
                message="Mã giảm giá đã được áp dụng",
                discount_rate=state.discount_rate,
            )

        rate = self.lookup(code or "")
        if rate is None:
            logger.info(f"Rejected coupon code {code!r}")
            return CouponOutcome(
                accepted=False,
                message="Mã giảm giá không hợp lệ hoặc đã hết hạn!",
            )

        state.code = code.strip()
        state.applied = True
        state.discount_rate = rate
        percent = round(rate * 100)
        return CouponOutcome(
            accepted=True,
            message=f"Đã áp dụng mã giảm giá {percent}% thành công!",
            discount_rate=rate,
        )


def discount_amount(subtotal: float, state: CouponState) -> float:
    """Discount on the subtotal only; zero unless a coupon is applied"""
    if not state.applied:
        return 0.0
    return subtotal * state.discount_rate


coupon_evaluator = CouponEvaluator()
