"""Authentication routes for the storefront"""

from fastapi import APIRouter, Depends

from ..core.session import StorefrontSession
from ..models.auth import AuthResponse, LoginRequest
from ..services.auth import AuthService
from .deps import get_auth_service, get_session

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    session: StorefrontSession = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Log in with email and password"""
    ok = await auth_service.login(session, request.email, request.password)
    return AuthResponse(
        session_id=session.session_id,
        success=ok,
        user=session.user,
        message=None if ok else session.auth_error,
    )


@router.post("/logout", response_model=AuthResponse)
async def logout(
    session: StorefrontSession = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Log out; the cart, coupon and checkout stage are reset"""
    ok = await auth_service.logout(session)
    return AuthResponse(
        session_id=session.session_id,
        success=ok,
        message=None if ok else session.auth_error,
    )


@router.get("/me", response_model=AuthResponse)
async def me(
    refresh: bool = False,
    session: StorefrontSession = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Current user, optionally reloaded from the backend"""
    if refresh:
        await auth_service.refresh_profile(session)
    return AuthResponse(
        session_id=session.session_id,
        success=session.is_authenticated,
        user=session.user,
    )
