"""HTTP handlers for neologism cache operations.

Handlers convert between DTOs (API contracts) and cache calls. The cache
never raises, so mutation outcomes are reported through the notifications
it produced rather than through HTTP status codes.
"""

import dataclasses

from fastapi import HTTPException, status

from neologism_cache.dto import (
    CategoryItem,
    CreateCategoryRequest,
    CreateNeologismRequest,
    HealthCheckResponse,
    LoginRequest,
    MutationResponse,
    NeologismItem,
    NotificationItem,
    StatusUpdateRequest,
    UpdateNeologismRequest,
)
from neologism_cache.entities import Category, Neologism
from neologism_cache.errors import NeologismCacheError, UnauthenticatedError
from neologism_cache.queries import filter_by_category, filter_by_status
from neologism_cache.services import CollectingNotificationSink, EntityCache


class NeologismHandler:
    """HTTP handlers over one session-scoped EntityCache.

    Example:
        ```python
        notifications = CollectingNotificationSink()
        cache = EntityCache.create(service=service, notifier=notifications)
        handler = NeologismHandler(cache=cache, notifications=notifications)
        ```
    """

    def __init__(self, cache: EntityCache, notifications: CollectingNotificationSink) -> None:
        """Initialize the handler.

        Args:
            cache: The entity cache (required).
            notifications: The sink the cache notifies into (required).
        """
        self._cache = cache
        self._notifications = notifications

    @property
    def cache(self) -> EntityCache:
        return self._cache

    def _respond(self, success: bool, data: Neologism | Category | None = None) -> MutationResponse:
        item: NeologismItem | CategoryItem | None = None
        if isinstance(data, Neologism):
            item = NeologismItem.from_entity(data)
        elif isinstance(data, Category):
            item = CategoryItem.from_entity(data)
        return MutationResponse(
            success=success,
            data=item,
            notifications=[NotificationItem.from_entity(n) for n in self._notifications.drain()],
        )

    def _require_mirrored(self, neologism_id: str) -> Neologism:
        record = self._cache.get_neologism(neologism_id)
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Neologism {neologism_id} not found",
            )
        return record

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_neologisms(
        self,
        q: str | None = None,
        category_id: str | None = None,
        status_filter: str | None = None,
    ) -> list[NeologismItem]:
        """Handle GET /neologisms: search, then category and status filters."""
        found = self._cache.search_neologisms(q)
        found = filter_by_category(found, category_id)
        found = filter_by_status(found, status_filter)
        return [NeologismItem.from_entity(n) for n in found]

    def get_neologism(self, neologism_id: str) -> NeologismItem:
        return NeologismItem.from_entity(self._require_mirrored(neologism_id))

    def get_latest(self) -> NeologismItem:
        """Handle GET /neologisms/latest."""
        latest = self._cache.get_latest_neologism()
        if latest is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No neologisms yet")
        return NeologismItem.from_entity(latest)

    def get_random(self) -> NeologismItem:
        """Handle GET /neologisms/random."""
        featured = self._cache.get_random_neologism()
        if featured is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No ready neologisms")
        return NeologismItem.from_entity(featured)

    def list_categories(self) -> list[CategoryItem]:
        return [CategoryItem.from_entity(c) for c in self._cache.categories]

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health."""
        snapshot = self._cache.snapshot
        return HealthCheckResponse(
            status="loading" if snapshot.loading else "ready",
            authenticated=self._cache.auth.is_authenticated,
            neologism_count=len(snapshot.neologisms),
            category_count=len(snapshot.categories),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_neologism(self, request: CreateNeologismRequest) -> MutationResponse:
        """Handle POST /neologisms."""
        created = await self._cache.add_neologism(request.to_draft())
        return self._respond(created is not None, created)

    async def update_neologism(self, neologism_id: str, request: UpdateNeologismRequest) -> MutationResponse:
        """Handle PUT /neologisms/{id}."""
        current = self._require_mirrored(neologism_id)
        edited = dataclasses.replace(
            current,
            name=request.name,
            definition=request.definition,
            root_words=tuple(request.root_words),
            category_id=request.category_id,
            image_url=request.image_url,
            status=request.status,
        )
        updated = await self._cache.update_neologism(edited)
        return self._respond(updated is not None, updated)

    async def update_status(self, neologism_id: str, request: StatusUpdateRequest) -> MutationResponse:
        """Handle PATCH /neologisms/{id}/status."""
        updated = await self._cache.update_neologism_status(neologism_id, request.status)
        return self._respond(updated is not None, updated)

    async def delete_neologism(self, neologism_id: str) -> MutationResponse:
        """Handle DELETE /neologisms/{id}."""
        deleted = await self._cache.delete_neologism(neologism_id)
        return self._respond(deleted)

    async def create_category(self, request: CreateCategoryRequest) -> MutationResponse:
        """Handle POST /categories."""
        created = await self._cache.add_category(request.name)
        return self._respond(created is not None, created)

    async def refresh(self) -> MutationResponse:
        """Handle POST /refresh."""
        return self._respond(await self._cache.refresh_data())

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def login(self, request: LoginRequest) -> MutationResponse:
        """Handle POST /auth/login.

        Raises:
            HTTPException: 401 for rejected credentials, 502 if the auth
                server cannot be reached
        """
        try:
            await self._cache.auth.sign_in(request.email, request.password)
        except UnauthenticatedError as e:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e
        except NeologismCacheError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Sign-in failed: {e}",
            ) from e
        return self._respond(True)

    async def logout(self) -> MutationResponse:
        """Handle POST /auth/logout."""
        try:
            await self._cache.auth.sign_out()
        except NeologismCacheError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Sign-out failed: {e}",
            ) from e
        return self._respond(True)
