import asyncio

import pytest

from storefront.models.checkout import PaymentMethod, PlaceOrderRequest
from storefront.models.notification import NotificationKind
from storefront.services.checkout import (
    NOT_REAL_PAYMENT_WARNING,
    CheckoutError,
    CheckoutService,
    build_order_payload,
    validate_order_form,
)
from storefront.services.coupons import coupon_evaluator
from conftest import make_product


@pytest.fixture
def shopper(session, customer):
    session.sign_in(customer, "token-khach@example.com")
    session.cart.add_item(make_product("1", price=100000), 2)
    session.gate.request_checkout(session.is_authenticated)
    return session


def test_cod_payload_has_no_wallet(shopper):
    payload = build_order_payload(shopper, PlaceOrderRequest(payment_method=PaymentMethod.COD))
    assert "digitalWallet" not in payload
    assert payload["items"] == [{"productId": "1", "quantity": 2}]


def test_missing_payment_method(shopper):
    errors = validate_order_form(shopper, PlaceOrderRequest(payment_method=None))
    assert "payment_method" in errors


def test_place_order_resets_session(shopper, backend_client, backend):
    coupon_evaluator.apply_coupon(shopper.coupon, "DISCOUNT20")
    service = CheckoutService(backend_client, shipping_fee=30000)

    order_id, totals = asyncio.run(service.place_order(shopper, PlaceOrderRequest()))

    assert order_id == "2000"
    assert totals.discount_amount == pytest.approx(40000)
    assert totals.final_total == pytest.approx(190000)
    assert shopper.cart.is_empty
    assert not shopper.coupon.applied
    assert not shopper.gate.in_checkout
    assert [n.kind for n in shopper.notifier.pending][-2:] == [
        NotificationKind.SUCCESS,
        NotificationKind.WARNING,
    ]
    assert shopper.notifier.pending[-1].message == NOT_REAL_PAYMENT_WARNING
    assert backend.requests_to("POST", "/don-hang")[0].headers["Authorization"] == (
        "Bearer token-khach@example.com"
    )


def test_backend_rejection_leaves_state(shopper, backend_client, backend):
    backend.fail_orders = True
    service = CheckoutService(backend_client, shipping_fee=30000)

    with pytest.raises(CheckoutError):
        asyncio.run(service.place_order(shopper, PlaceOrderRequest()))

    assert shopper.cart.total_items == 2
    assert shopper.gate.in_checkout
    assert shopper.notifier.pending[-1].kind == NotificationKind.ERROR
