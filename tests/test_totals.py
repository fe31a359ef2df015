import pytest

from storefront.services.cart_store import CartStore
from storefront.services.coupons import CouponState, coupon_evaluator
from storefront.services.totals import calculate_totals
from conftest import make_product

SHIPPING_FEE = 30000


def test_example_scenario():
    cart = CartStore()
    cart.add_item(make_product(price=100000, stock=5), 2)
    coupon = CouponState()

    totals = calculate_totals(cart.total_price, coupon, SHIPPING_FEE)
    assert totals.subtotal == 200000
    assert totals.discount_amount == 0
    assert totals.final_total == 230000

    coupon_evaluator.apply_coupon(coupon, "DISCOUNT10")
    totals = calculate_totals(cart.total_price, coupon, SHIPPING_FEE)
    assert totals.discount_amount == pytest.approx(20000)
    assert totals.final_total == pytest.approx(210000)


def test_discount_never_touches_shipping():
    coupon = CouponState(code="DISCOUNT20", applied=True, discount_rate=0.2)
    totals = calculate_totals(0, coupon, SHIPPING_FEE)
    assert totals.discount_amount == 0
    assert totals.final_total == SHIPPING_FEE


@pytest.mark.parametrize("subtotal", [0, 1, 99999, 200000, 12345678])
@pytest.mark.parametrize("rate", [0.0, 0.1, 0.2, 0.99])
def test_final_total_identity_and_non_negative(subtotal, rate):
    coupon = CouponState(code="X", applied=rate > 0, discount_rate=rate)
    totals = calculate_totals(subtotal, coupon, SHIPPING_FEE)
    assert totals.final_total == pytest.approx(
        totals.subtotal + totals.shipping_fee - totals.discount_amount
    )
    assert totals.final_total >= 0


def test_negative_shipping_fee_is_refused():
    with pytest.raises(ValueError):
        calculate_totals(1000, CouponState(), -1)
