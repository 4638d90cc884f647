"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Supabase → another REST backend, etc.)
- Unit testing with in-memory fakes
- Clear separation of concerns

Usage:
    ```python
    from neologism_cache.protocols import NotificationSink, RemoteEntityService

    service: RemoteEntityService = SupabaseEntityService.create()
    sink: NotificationSink = LoggingNotificationSink()
    ```
"""

from .entity_service import RemoteEntityService
from .notification_sink import NotificationSink

__all__ = [
    "NotificationSink",
    "RemoteEntityService",
]
