"""Neologism Cache - client-side mirror of a crowdsourced neologism dictionary.

This package provides a layered architecture around one entity cache:

Layers:
    - protocols: Interface contracts (RemoteEntityService, NotificationSink)
    - repositories: Remote store implementations (Supabase)
    - services: Entity cache, auth state, notification sinks
    - queries: Pure derived views (search, filters, latest, featured)
    - handlers / api: HTTP surface
    - dto: Data transfer objects (wire rows and API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from neologism_cache import EntityCache, LoggingNotificationSink, SupabaseEntityService

    service = SupabaseEntityService.create()
    cache = EntityCache.create(service=service, notifier=LoggingNotificationSink())
    await cache.refresh_data()
    ```

For HTTP API:
    ```python
    from neologism_cache.api.app import app
    ```
"""

from neologism_cache.config import settings
from neologism_cache.entities import (
    CacheSnapshot,
    Category,
    Neologism,
    NeologismDraft,
    NeologismStatus,
    Notification,
    NotificationKind,
)
from neologism_cache.errors import (
    NeologismCacheError,
    NotFoundError,
    ServiceError,
    UnauthenticatedError,
)
from neologism_cache.protocols import NotificationSink, RemoteEntityService
from neologism_cache.repositories import SupabaseEntityService
from neologism_cache.services import (
    AuthState,
    CollectingNotificationSink,
    EntityCache,
    LoggingNotificationSink,
)

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "NotificationSink",
    "RemoteEntityService",
    # Services
    "AuthState",
    "CollectingNotificationSink",
    "EntityCache",
    "LoggingNotificationSink",
    # Repositories (data access)
    "SupabaseEntityService",
    # Entities (domain models)
    "CacheSnapshot",
    "Category",
    "Neologism",
    "NeologismDraft",
    "NeologismStatus",
    "Notification",
    "NotificationKind",
    # Errors
    "NeologismCacheError",
    "NotFoundError",
    "ServiceError",
    "UnauthenticatedError",
]
