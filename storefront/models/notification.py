"""Notification models for the storefront"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Notification(BaseModel):
    """User-facing feedback message"""
    kind: NotificationKind
    message: str
    created_at: datetime


class NotificationsResponse(BaseModel):
    session_id: str
    notifications: list[Notification] = []
