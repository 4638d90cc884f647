"""Domain entities for internal representation.

These are pure dataclasses (frozen) used by the cache, the query layer and
the repositories. They are NOT used for wire or API contracts - use the
pydantic models from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
"""

from .auth_session import AuthSession
from .category import Category
from .neologism import Neologism, NeologismDraft, NeologismStatus
from .notification import Notification, NotificationKind
from .snapshot import CacheSnapshot

__all__ = [
    "AuthSession",
    "CacheSnapshot",
    "Category",
    "Neologism",
    "NeologismDraft",
    "NeologismStatus",
    "Notification",
    "NotificationKind",
]
