# Core modules

from .config import settings
from .money import format_currency, format_datetime
from .session import SessionManager, StorefrontSession, session_manager

__all__ = [
    "settings",
    "format_currency",
    "format_datetime",
    "SessionManager",
    "StorefrontSession",
    "session_manager",
]
