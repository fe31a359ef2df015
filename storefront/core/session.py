"""Session management for storefront shoppers and administrators"""

import logging
import uuid
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from ..models.auth import User
from ..services.cart_store import CartStore
from ..services.checkout_gate import CheckoutGate
from ..services.coupons import CouponState
from ..services.notifications import Notifier
from ..services.order_admin import OrderConsole
from .config import settings

logger = logging.getLogger(__name__)


@dataclass
class StorefrontSession:
    """One user's cart, coupon, checkout stage and login state"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    login_path: str = "/login"
    checkout_path: str = "/checkout"
    cart: CartStore = field(default_factory=CartStore)
    coupon: CouponState = field(default_factory=CouponState)
    notifier: Notifier = field(default_factory=Notifier)
    user: Optional[User] = None
    token: Optional[str] = None
    auth_error: Optional[str] = None
    gate: CheckoutGate = field(init=False)
    # Set on first admin order request
    orders: Optional[OrderConsole] = None

    def __post_init__(self):
        self.gate = CheckoutGate(
            self.notifier,
            login_path=self.login_path,
            checkout_path=self.checkout_path,
        )

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def reset_shopping(self) -> None:
        """Empty the cart and unlock the coupon and checkout gate"""
        self.cart.clear_cart()
        self.coupon.reset()
        self.gate.reset()
        self.touch()

    def sign_in(self, user: User, token: Optional[str]) -> None:
        self.user = user
        self.token = token
        self.auth_error = None
        self.touch()

    def sign_out(self) -> None:
        """Forget the user and reset everything tied to them"""
        self.user = None
        self.token = None
        self.orders = None
        self.reset_shopping()


class SessionManager:
    """Manages storefront sessions"""

    def __init__(
        self,
        login_path: str = "/login",
        checkout_path: str = "/checkout",
        max_age_hours: int = 24,
    ):
        self.login_path = login_path
        self.checkout_path = checkout_path
        self.max_age_hours = max_age_hours
        self.sessions: dict[str, StorefrontSession] = {}

    def is_expired(self, session: StorefrontSession, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return (now - session.updated_at).total_seconds() > self.max_age_hours * 3600

    def create_session(self) -> StorefrontSession:
        """Create a new session, dropping expired ones first"""
        self.cleanup_old_sessions()
        now = datetime.utcnow()
        session = StorefrontSession(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            login_path=self.login_path,
            checkout_path=self.checkout_path,
        )
        self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: Optional[str]) -> Optional[StorefrontSession]:
        """Get a live session by ID; expired sessions are deleted"""
        session = self.sessions.get(session_id) if session_id else None
        if session is None:
            return None
        if self.is_expired(session):
            logger.info(f"Session {session_id} expired")
            self.delete_session(session_id)
            return None
        return session

    def delete_session(self, session_id: str) -> bool:
        """Delete a session"""
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def cleanup_old_sessions(self, max_age_hours: Optional[int] = None) -> int:
        """Remove sessions idle for longer than max_age_hours"""
        if max_age_hours is None:
            max_age_hours = self.max_age_hours
        now = datetime.utcnow()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            del self.sessions[sid]
        if old_sessions:
            logger.info(f"Dropped {len(old_sessions)} expired sessions")
        return len(old_sessions)


# Singleton instance
session_manager = SessionManager(
    login_path=settings.login_path,
    checkout_path=settings.checkout_path,
    max_age_hours=settings.session_max_age_hours,
)
