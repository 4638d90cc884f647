"""Notification domain entity."""

from dataclasses import dataclass
from enum import Enum


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A user-facing outcome report for a cache operation."""

    kind: NotificationKind
    title: str
    message: str
