"""Response DTOs for API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from neologism_cache.entities import Category, Neologism, Notification


class NeologismItem(BaseModel):
    """Single neologism as served by the API."""

    id: str
    name: str
    root_words: list[str]
    category_id: str | None
    category: str | None = Field(None, description="Category name, derived from category_id")
    definition: str
    image_url: str | None
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, record: Neologism) -> "NeologismItem":
        return cls(
            id=record.id,
            name=record.name,
            root_words=list(record.root_words),
            category_id=record.category_id,
            category=record.category,
            definition=record.definition,
            image_url=record.image_url,
            status=str(record.status),
            created_at=record.created_at,
        )


class CategoryItem(BaseModel):
    """Single category as served by the API."""

    id: str
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryItem":
        return cls(id=category.id, name=category.name)


class NotificationItem(BaseModel):
    """A notification raised while serving a request."""

    kind: str = Field(..., description="'success' or 'error'")
    title: str
    message: str

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationItem":
        return cls(
            kind=notification.kind.value,
            title=notification.title,
            message=notification.message,
        )


class MutationResponse(BaseModel):
    """Response DTO for any cache mutation.

    Failed mutations are not HTTP errors: the cache leaves its state
    unchanged and the reason is carried in ``notifications``.
    """

    success: bool = Field(..., description="Whether the cache applied the change")
    data: NeologismItem | CategoryItem | None = Field(
        None,
        description="The canonical record returned by the remote store",
    )
    notifications: list[NotificationItem] = Field(default_factory=list)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="'loading' or 'ready'")
    authenticated: bool
    neologism_count: int = Field(..., ge=0)
    category_count: int = Field(..., ge=0)
