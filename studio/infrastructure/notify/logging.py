import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

from studio.domain.shared.port.notifier import Notifier

logger = logging.getLogger(__name__)

NotificationLevel = Literal["success", "error", "info"]

DEFAULT_HISTORY_SIZE = 100


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class LoggingNotifier(Notifier):
    """Notifier that logs each message and keeps recent ones for the UI to drain.

    Only the newest ``max_history`` notifications are kept; older ones have
    already been logged and are dropped.
    """

    def __init__(self, max_history: int = DEFAULT_HISTORY_SIZE) -> None:
        self.history: deque[Notification] = deque(maxlen=max_history)

    def success(self, message: str) -> None:
        logger.info(message)
        self.history.append(Notification("success", message))

    def error(self, message: str) -> None:
        logger.error(message)
        self.history.append(Notification("error", message))

    def info(self, message: str) -> None:
        logger.info(message)
        self.history.append(Notification("info", message))

    def drain(self) -> list[Notification]:
        """Return and forget pending notifications."""
        pending = list(self.history)
        self.history.clear()
        return pending
