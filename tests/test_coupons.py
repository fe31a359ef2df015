import pytest

from storefront.services.coupons import (
    CouponEvaluator,
    CouponState,
    coupon_evaluator,
    discount_amount,
)


@pytest.mark.parametrize("code", ["DISCOUNT10", "discount10", "Discount10", "  discount10 "])
def test_discount10_is_case_insensitive(code):
    state = CouponState()
    outcome = coupon_evaluator.apply_coupon(state, code)
    assert outcome.accepted
    assert state.applied
    assert state.discount_rate == 0.10


def test_discount20():
    state = CouponState()
    assert coupon_evaluator.apply_coupon(state, "DISCOUNT20").accepted
    assert state.discount_rate == 0.20


@pytest.mark.parametrize("code", ["BOGUS", "", "DISCOUNT30", "DISCOUNT"])
def test_unknown_codes_are_rejected(code):
    state = CouponState()
    outcome = coupon_evaluator.apply_coupon(state, code)
    assert not outcome.accepted
    assert outcome.message
    assert state.applied is False
    assert state.discount_rate == 0


def test_applied_coupon_is_locked():
    state = CouponState()
    coupon_evaluator.apply_coupon(state, "DISCOUNT10")
    outcome = coupon_evaluator.apply_coupon(state, "DISCOUNT20")
    assert not outcome.accepted
    assert state.code == "DISCOUNT10"
    assert state.discount_rate == 0.10


def test_reset_unlocks():
    state = CouponState()
    coupon_evaluator.apply_coupon(state, "DISCOUNT10")
    state.reset()
    assert state.applied is False
    assert state.discount_rate == 0
    assert coupon_evaluator.apply_coupon(state, "DISCOUNT20").accepted


def test_rates_outside_range_are_refused():
    with pytest.raises(ValueError):
        CouponEvaluator({"FREE": 1.0})
    with pytest.raises(ValueError):
        CouponEvaluator({"NEG": -0.1})


def test_discount_amount_is_zero_without_coupon():
    assert discount_amount(200000, CouponState()) == 0


def test_discount_amount_uses_subtotal():
    state = CouponState(code="DISCOUNT20", applied=True, discount_rate=0.2)
    assert discount_amount(200000, state) == pytest.approx(40000)
