"""Login state for storefront sessions"""

import logging
from typing import TYPE_CHECKING

from ..models.auth import User
from .backend_client import BackendClient, BackendError

if TYPE_CHECKING:
    from ..core.session import StorefrontSession

logger = logging.getLogger(__name__)


class AuthService:
    """Logs sessions in and out against the backend"""

    def __init__(self, client: BackendClient):
        self.client = client

    async def login(self, session: "StorefrontSession", email: str, password: str) -> bool:
        """
        Log a session in.

        Failures are recorded on session.auth_error and reported as False,
        never raised.
        """
        session.auth_error = None
        try:
            token, record = await self.client.login(email, password)
            user = User.from_backend(record)
        except BackendError as e:
            logger.info(f"Login failed for {email}: {e.message}")
            session.auth_error = e.message or "Đăng nhập thất bại"
            session.notifier.error(session.auth_error)
            return False

        session.sign_in(user, token)
        session.notifier.success(f"Xin chào, {user.full_name or user.email}!")
        logger.info(f"User {user.id} logged in as {user.role}")
        return True

    async def logout(self, session: "StorefrontSession") -> bool:
        """
        Log a session out.

        The local user is cleared even when the backend call fails.
        """
        ok = True
        try:
            await self.client.logout(session.token)
        except BackendError as e:
            logger.warning(f"Backend logout failed: {e.message}")
            session.auth_error = e.message or "Đăng xuất thất bại"
            ok = False
        finally:
            session.sign_out()
        return ok

    async def refresh_profile(self, session: "StorefrontSession") -> bool:
        """Reload the logged-in user's profile from the backend"""
        if not session.is_authenticated:
            return False
        try:
            record = await self.client.get_profile(session.token)
        except BackendError as e:
            logger.warning(f"Profile refresh failed: {e.message}")
            return False
        if record:
            session.user = User.from_backend(record)
        return True
