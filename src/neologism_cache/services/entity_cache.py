"""Entity cache: the in-memory mirror of the remote neologism store.

The cache is read-through, write-around: every write goes to the remote
service first and the mirror only changes from the service's canonical
response. It is also the error boundary of the client - no operation here
raises; failures become one notification each and leave the mirror at its
last known good state.
"""

import asyncio
import logging
import random

from neologism_cache import queries
from neologism_cache.dto import NeologismPatch
from neologism_cache.entities import (
    CacheSnapshot,
    Category,
    Neologism,
    NeologismDraft,
    Notification,
    NotificationKind,
)
from neologism_cache.errors import NeologismCacheError
from neologism_cache.protocols import NotificationSink, RemoteEntityService

from .auth import AuthState

logger = logging.getLogger(__name__)


class EntityCache:
    """Session-scoped mirror of neologisms and categories.

    Depends on PROTOCOLS, not concrete implementations:
    - RemoteEntityService: Supabase, an in-memory fake, etc.
    - NotificationSink: log, collecting buffer, UI toast bridge, etc.

    Invariants kept by every mutating path:
    - ``neologisms`` is newest first (creations are prepended, edits are
      replaced in place, nothing re-sorts).
    - The mirror is reassigned in a single statement after the awaited
      remote call returns, so readers never see a half-applied change.

    Example:
        ```python
        service = SupabaseEntityService.create()
        cache = EntityCache.create(service=service, notifier=LoggingNotificationSink())
        await cache.refresh_data()
        cache.search_neologisms("blend")
        ```
    """

    def __init__(
        self,
        service: RemoteEntityService,
        notifier: NotificationSink,
        auth: AuthState,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the cache with an empty snapshot.

        Args:
            service: Remote store the cache mirrors (required).
            notifier: Channel for operation outcomes (required).
            auth: Source of the authenticated flag (required).
            rng: Random source for the featured-word draw.
        """
        self._service = service
        self._notifier = notifier
        self._auth = auth
        self._rng = rng

        self._neologisms: tuple[Neologism, ...] = ()
        self._categories: tuple[Category, ...] = ()
        self._loading = False
        self._latest_neologism_id: str | None = None

    @classmethod
    def create(
        cls,
        service: RemoteEntityService,
        notifier: NotificationSink,
        auth: AuthState | None = None,
        rng: random.Random | None = None,
    ) -> "EntityCache":
        """Factory method that also wires the auth subscription.

        A login or logout reloads the whole mirror, since the rows visible
        to the session may change with the identity.

        Args:
            service: Remote store (required).
            notifier: Notification channel (required).
            auth: Auth state. If None, a new one over ``service`` is created.
            rng: Optional random source.

        Returns:
            Configured EntityCache subscribed to ``auth``
        """
        auth = auth or AuthState(service)
        cache = cls(service=service, notifier=notifier, auth=auth, rng=rng)
        auth.subscribe(cache._on_auth_changed)
        return cache

    async def _on_auth_changed(self, authenticated: bool) -> None:
        logger.debug("Auth changed (authenticated=%s), refreshing", authenticated)
        await self.refresh_data()

    # ------------------------------------------------------------------
    # Snapshot accessors
    # ------------------------------------------------------------------

    @property
    def neologisms(self) -> tuple[Neologism, ...]:
        return self._neologisms

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def latest_neologism_id(self) -> str | None:
        return self._latest_neologism_id

    @property
    def auth(self) -> AuthState:
        return self._auth

    @property
    def snapshot(self) -> CacheSnapshot:
        """Immutable view of the current state."""
        return CacheSnapshot(
            neologisms=self._neologisms,
            categories=self._categories,
            loading=self._loading,
            latest_neologism_id=self._latest_neologism_id,
        )

    def get_neologism(self, neologism_id: str) -> Neologism | None:
        """Look a record up in the mirror (no network)."""
        return next((n for n in self._neologisms if n.id == neologism_id), None)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def _notify(self, kind: NotificationKind, title: str, message: str) -> None:
        try:
            self._notifier.notify(Notification(kind=kind, title=title, message=message))
        except Exception:
            # Sinks are best-effort
            logger.exception("Notification sink failed for %r", title)

    def _notify_success(self, message: str) -> None:
        self._notify(NotificationKind.SUCCESS, "Success", message)

    def _require_auth(self, action: str) -> bool:
        if self._auth.is_authenticated:
            return True
        logger.info("Refused to %s: not authenticated", action)
        self._notify(NotificationKind.ERROR, "Authentication Required", f"Please log in to {action}")
        return False

    def _report_failure(self, action: str, error: BaseException) -> None:
        if isinstance(error, NeologismCacheError):
            logger.warning("Failed to %s (%s): %s", action, error.kind, error)
        else:
            logger.error("Unexpected error while trying to %s", action, exc_info=error)
        self._notify(NotificationKind.ERROR, "Error", f"Failed to {action}")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def refresh_data(self) -> bool:
        """Reload neologisms and categories concurrently.

        The snapshot is replaced only when both fetches succeed.

        Returns:
            True if the snapshot was replaced, False otherwise
        """
        self._loading = True
        try:
            results = await asyncio.gather(
                self._service.list_neologisms(),
                self._service.list_categories(),
                return_exceptions=True,
            )
        finally:
            self._loading = False

        for result in results:
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                self._report_failure("load data", result)
                return False

        neologisms, categories = results
        self._neologisms, self._categories = tuple(neologisms), tuple(categories)
        logger.info(
            "Loaded %d neologisms and %d categories",
            len(self._neologisms),
            len(self._categories),
        )
        return True

    async def add_neologism(self, draft: NeologismDraft) -> Neologism | None:
        """Create a neologism and put it at the head of the mirror.

        Returns:
            The canonical record, or None if nothing changed
        """
        logger.debug("add_neologism called: %r (authenticated=%s)", draft.name, self._auth.is_authenticated)
        if not self._require_auth("create a neologism"):
            return None

        try:
            created = await self._service.create_neologism(draft)
        except Exception as e:
            self._report_failure("create neologism", e)
            return None

        # Newest record goes first; no re-sort needed
        self._neologisms = (created, *self._neologisms)
        self._latest_neologism_id = created.id
        logger.info("Created neologism %s (%r)", created.id, created.name)
        self._notify_success("Neologism created successfully")
        return created

    async def add_category(self, name: str) -> Category | None:
        """Create a category and append it to the mirror.

        The categories are not re-sorted after the append, so a new category
        sits at the end until the next refresh.
        """
        if not self._require_auth("create a category"):
            return None

        try:
            created = await self._service.create_category(name)
        except Exception as e:
            self._report_failure("create category", e)
            return None

        self._categories = (*self._categories, created)
        logger.info("Created category %s (%r)", created.id, created.name)
        self._notify_success("Category created successfully")
        return created

    async def update_neologism_status(self, neologism_id: str, status: str) -> Neologism | None:
        """Move a neologism to another workflow state, keeping its position."""
        if not self._require_auth("update neologisms"):
            return None

        try:
            updated = await self._service.update_neologism(
                neologism_id, NeologismPatch(status=str(status))
            )
        except Exception as e:
            self._report_failure("update neologism status", e)
            return None

        self._replace(neologism_id, updated)
        self._notify_success("Neologism status updated")
        return updated

    async def update_neologism(self, record: Neologism) -> Neologism | None:
        """Save the editable fields of ``record``, keeping its position.

        The id selects the target; created_at and the category name are
        never sent.
        """
        if not self._require_auth("update neologisms"):
            return None

        try:
            updated = await self._service.update_neologism(
                record.id, NeologismPatch.from_neologism(record)
            )
        except Exception as e:
            self._report_failure("update neologism", e)
            return None

        self._replace(record.id, updated)
        self._notify_success("Neologism updated successfully")
        return updated

    async def delete_neologism(self, neologism_id: str) -> bool:
        """Delete a neologism and drop it from the mirror."""
        if not self._require_auth("delete neologisms"):
            return False

        try:
            await self._service.delete_neologism(neologism_id)
        except Exception as e:
            self._report_failure("delete neologism", e)
            return False

        self._neologisms = tuple(n for n in self._neologisms if n.id != neologism_id)
        logger.info("Deleted neologism %s", neologism_id)
        self._notify_success("Neologism deleted successfully")
        return True

    def _replace(self, neologism_id: str, updated: Neologism) -> None:
        self._neologisms = tuple(updated if n.id == neologism_id else n for n in self._neologisms)
        logger.info("Updated neologism %s", neologism_id)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def search_neologisms(self, query: str | None) -> list[Neologism]:
        return queries.search_neologisms(self._neologisms, query)

    def filter_by_category(self, category_id: str | None) -> list[Neologism]:
        return queries.filter_by_category(self._neologisms, category_id)

    def filter_by_status(self, status: str | None) -> list[Neologism]:
        return queries.filter_by_status(self._neologisms, status)

    def get_latest_neologism(self) -> Neologism | None:
        return queries.get_latest_neologism(self._neologisms)

    def get_random_neologism(self) -> Neologism | None:
        """Featured word: the session's latest creation while it exists, else a random Ready one."""
        return queries.get_random_neologism(
            self._neologisms,
            sticky_id=self._latest_neologism_id,
            rng=self._rng,
        )
