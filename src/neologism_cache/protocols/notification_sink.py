"""Notification sink protocol.

A write-only, best-effort channel through which the entity cache reports
the outcome of its operations to the user.
"""

from typing import Protocol, runtime_checkable

from neologism_cache.entities import Notification


@runtime_checkable
class NotificationSink(Protocol):
    """Protocol for notification channels."""

    def notify(self, notification: Notification) -> None:
        """Deliver a notification. No acknowledgment is expected.

        Args:
            notification: The outcome to report
        """
        ...
