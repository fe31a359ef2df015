"""Fire-and-forget user notifications"""

import logging
from datetime import datetime

from ..models.notification import Notification, NotificationKind

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    NotificationKind.SUCCESS: logging.INFO,
    NotificationKind.INFO: logging.INFO,
    NotificationKind.WARNING: logging.WARNING,
    NotificationKind.ERROR: logging.ERROR,
}


class Notifier:
    """Queues notifications for one session until the client drains them"""

    def __init__(self, max_pending: int = 50):
        self.max_pending = max_pending
        self._pending: list[Notification] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        """Queue a notification; never raises"""
        kind = NotificationKind(kind)
        logger.log(_LOG_LEVELS[kind], f"[{kind.value}] {message}")
        self._pending.append(
            Notification(kind=kind, message=message, created_at=datetime.utcnow())
        )
        # Oldest messages drop first when nobody is reading
        if len(self._pending) > self.max_pending:
            self._pending = self._pending[-self.max_pending:]

    def success(self, message: str) -> None:
        self.notify(NotificationKind.SUCCESS, message)

    def error(self, message: str) -> None:
        self.notify(NotificationKind.ERROR, message)

    def warning(self, message: str) -> None:
        self.notify(NotificationKind.WARNING, message)

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return and clear queued notifications"""
        drained, self._pending = self._pending, []
        return drained
