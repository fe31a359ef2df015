from storefront.models.checkout import CheckoutStage
from storefront.models.notification import NotificationKind
from storefront.services.checkout_gate import CheckoutGate
from storefront.services.notifications import Notifier


def make_gate():
    notifier = Notifier()
    return CheckoutGate(notifier, login_path="/login"), notifier


def test_starts_in_cart():
    gate, _ = make_gate()
    assert gate.stage == CheckoutStage.CART


def test_unauthenticated_is_sent_to_login():
    gate, notifier = make_gate()
    result = gate.request_checkout(is_authenticated=False)
    assert not result.allowed
    assert result.redirect_to == "/login"
    assert gate.stage == CheckoutStage.CART
    assert [n.kind for n in notifier.pending] == [NotificationKind.WARNING]


def test_unauthenticated_never_reaches_checkout_on_repeat():
    gate, _ = make_gate()
    for _ in range(3):
        gate.request_checkout(is_authenticated=False)
    assert not gate.in_checkout


def test_authenticated_reaches_checkout():
    gate, notifier = make_gate()
    result = gate.request_checkout(is_authenticated=True)
    assert result.allowed
    assert result.redirect_to == "/checkout"
    assert gate.stage == CheckoutStage.CHECKOUT
    assert notifier.pending == []


def test_authenticated_checkout_does_not_depend_on_cart():
    gate, _ = make_gate()
    for _ in range(2):
        result = gate.request_checkout(is_authenticated=True)
        assert result.allowed
        assert result.redirect_to == "/checkout"
    assert gate.stage == CheckoutStage.CHECKOUT


def test_reset_returns_to_cart():
    gate, _ = make_gate()
    gate.request_checkout(is_authenticated=True)
    gate.reset()
    assert gate.stage == CheckoutStage.CART
