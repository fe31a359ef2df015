"""Cart to checkout transition"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.checkout import CheckoutStage
from .notifications import Notifier

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_MESSAGE = "Vui lòng đăng nhập để tiếp tục thanh toán"


@dataclass
class GateResult:
    """Outcome of a checkout request"""
    allowed: bool
    stage: CheckoutStage
    redirect_to: str
    message: Optional[str] = None


class CheckoutGate:
    """
    Two-state gate: CART (initial) and CHECKOUT.

    The transition fires only for an authenticated session. Otherwise a
    warning is emitted and the caller is sent to the login page while the
    gate stays in CART.
    """

    def __init__(
        self,
        notifier: Notifier,
        login_path: str = "/login",
        checkout_path: str = "/checkout",
    ):
        self.notifier = notifier
        self.login_path = login_path
        self.checkout_path = checkout_path
        self.stage = CheckoutStage.CART

    @property
    def in_checkout(self) -> bool:
        return self.stage == CheckoutStage.CHECKOUT

    def request_checkout(self, is_authenticated: bool) -> GateResult:
        """Try to move from CART to CHECKOUT"""
        if not is_authenticated:
            self.notifier.warning(LOGIN_REQUIRED_MESSAGE)
            return GateResult(
                allowed=False,
                stage=self.stage,
                redirect_to=self.login_path,
                message=LOGIN_REQUIRED_MESSAGE,
            )

        self.stage = CheckoutStage.CHECKOUT
        logger.debug("Checkout gate opened")
        return GateResult(
            allowed=True,
            stage=self.stage,
            redirect_to=self.checkout_path,
        )

    def reset(self) -> None:
        """Return to the CART stage"""
        self.stage = CheckoutStage.CART
