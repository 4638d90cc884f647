"""Service layer for client-side state.

Services depend on protocols (interfaces), not concrete implementations,
making them testable with in-memory fakes.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Cache) -> (Remote store)

Usage:
    ```python
    from neologism_cache.services import EntityCache, LoggingNotificationSink

    cache = EntityCache.create(service=service, notifier=LoggingNotificationSink())
    await cache.refresh_data()
    ```
"""

from .auth import AuthState
from .entity_cache import EntityCache
from .notifications import CollectingNotificationSink, LoggingNotificationSink

__all__ = [
    "AuthState",
    "CollectingNotificationSink",
    "EntityCache",
    "LoggingNotificationSink",
]
