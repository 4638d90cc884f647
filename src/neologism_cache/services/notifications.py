"""Notification sinks.

Both classes satisfy the NotificationSink protocol through structural
typing.
"""

import logging
from collections import deque

from neologism_cache.config import settings
from neologism_cache.entities import Notification, NotificationKind
from neologism_cache.protocols import NotificationSink

logger = logging.getLogger(__name__)


class LoggingNotificationSink:
    """Writes notifications to the log; errors at WARNING."""

    def __init__(self, logger_name: str | None = None) -> None:
        self._logger = logging.getLogger(logger_name) if logger_name else logger

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.kind is NotificationKind.ERROR else logging.INFO
        self._logger.log(level, "%s: %s", notification.title, notification.message)


class CollectingNotificationSink:
    """Keeps the most recent notifications until they are drained.

    Used by the HTTP layer to hand the outcome of a mutation back to the
    caller. Optionally forwards every notification to another sink.
    """

    def __init__(
        self,
        maxlen: int | None = None,
        forward_to: NotificationSink | None = None,
    ) -> None:
        self._pending: deque[Notification] = deque(maxlen=maxlen or settings.notification_buffer)
        self._forward_to = forward_to

    def notify(self, notification: Notification) -> None:
        self._pending.append(notification)
        if self._forward_to is not None:
            self._forward_to.notify(notification)

    def drain(self) -> list[Notification]:
        """Return pending notifications, oldest first, and forget them."""
        items = list(self._pending)
        self._pending.clear()
        return items

    def __len__(self) -> int:
        return len(self._pending)
