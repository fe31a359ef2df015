"""Shared route dependencies"""

from typing import Optional
from fastapi import Depends, Header, HTTPException

from ..core.config import settings
from ..core.session import StorefrontSession, session_manager
from ..services.auth import AuthService
from ..services.backend_client import BackendClient
from ..services.checkout import CheckoutService
from ..services.order_admin import OrderConsole

# Initialize services (overridden in tests via app.dependency_overrides)
backend_client: Optional[BackendClient] = None


def get_backend_client() -> BackendClient:
    """Get or create backend client"""
    global backend_client
    if backend_client is None:
        backend_client = BackendClient(
            base_url=settings.backend_api_url,
            timeout=settings.backend_timeout,
            service_token=settings.backend_token,
        )
    return backend_client


def get_session(x_session_id: Optional[str] = Header(None)) -> StorefrontSession:
    """
    Resolve the caller's session from the X-Session-Id header.

    Missing, unknown and expired ids are rejected; clients start a session
    with POST /api/session.
    """
    session = session_manager.get_session(x_session_id)
    if session is None:
        raise HTTPException(
            status_code=404,
            detail="Session not found or expired. Start one with POST /api/session",
        )
    session.touch()
    return session


def get_auth_service(client: BackendClient = Depends(get_backend_client)) -> AuthService:
    return AuthService(client)


def get_checkout_service(client: BackendClient = Depends(get_backend_client)) -> CheckoutService:
    return CheckoutService(client, shipping_fee=settings.shipping_fee)


def require_staff(session: StorefrontSession = Depends(get_session)) -> StorefrontSession:
    """Reject callers that are not logged in as admin or seller"""
    if not session.is_authenticated:
        raise HTTPException(status_code=401, detail="Login required")
    if not session.user.is_staff:
        raise HTTPException(status_code=403, detail="Administrator role required")
    return session


def get_order_console(
    session: StorefrontSession = Depends(require_staff),
    client: BackendClient = Depends(get_backend_client),
) -> OrderConsole:
    """Get or create the session's order console"""
    if session.orders is None:
        session.orders = OrderConsole(client, session.notifier)
    return session.orders
