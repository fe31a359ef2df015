"""Session and notification routes"""

from fastapi import APIRouter, Depends

from ..core.session import StorefrontSession, session_manager
from ..models.notification import NotificationsResponse
from .deps import get_session

router = APIRouter(prefix="/api", tags=["Session"])


@router.post("/session")
async def create_session():
    """Start a new storefront session"""
    session = session_manager.create_session()
    return {"session_id": session.session_id}


@router.get("/notifications", response_model=NotificationsResponse)
async def drain_notifications(session: StorefrontSession = Depends(get_session)):
    """Return and clear pending notifications"""
    return NotificationsResponse(
        session_id=session.session_id,
        notifications=session.notifier.drain(),
    )
