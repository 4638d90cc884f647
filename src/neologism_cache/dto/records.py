"""Row DTOs exchanged with the remote store.

Column names follow the store's snake_case schema. Each row model knows
how to turn itself into the matching domain entity.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from neologism_cache.entities import AuthSession, Category, Neologism, NeologismDraft


def _coerce_id(value: Any) -> Any:
    # Integer and uuid primary keys are both handled as strings client-side
    if value is None or isinstance(value, str):
        return value
    return str(value)


class CategoryRow(BaseModel):
    """A row of the ``categories`` table."""

    model_config = {"extra": "ignore"}

    id: str
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    def to_entity(self) -> Category:
        return Category(id=self.id, name=self.name)


class CategoryRef(BaseModel):
    """Embedded ``category:categories(name)`` projection."""

    name: str | None = None


class NeologismRow(BaseModel):
    """A row of the ``neologisms`` table with its embedded category name."""

    model_config = {"extra": "ignore"}

    id: str
    name: str
    root_words: list[str] | None = None
    category_id: str | None = None
    category: CategoryRef | None = None
    definition: str = ""
    image_url: str | None = None
    status: str
    created_at: datetime

    @field_validator("id", "category_id", mode="before")
    @classmethod
    def normalize_ids(cls, value: Any) -> Any:
        return _coerce_id(value)

    def to_entity(self) -> Neologism:
        return Neologism(
            id=self.id,
            name=self.name,
            root_words=tuple(self.root_words or ()),
            category_id=self.category_id,
            category=self.category.name if self.category else None,
            definition=self.definition,
            image_url=self.image_url,
            status=self.status,
            created_at=self.created_at,
        )


class NeologismInsert(BaseModel):
    """Insert payload for a new neologism owned by ``user_id``."""

    name: str
    root_words: list[str] = Field(default_factory=list)
    category_id: str | None = None
    definition: str
    image_url: str | None = None
    status: str
    user_id: str

    @classmethod
    def from_draft(cls, draft: NeologismDraft, user_id: str) -> "NeologismInsert":
        return cls(
            name=draft.name,
            root_words=list(draft.root_words),
            category_id=draft.category_id,
            definition=draft.definition,
            image_url=draft.image_url,
            status=str(draft.status),
            user_id=user_id,
        )


class NeologismPatch(BaseModel):
    """Partial update payload.

    Only fields that were explicitly set are sent, so an explicit ``None``
    clears a column while an omitted field leaves it untouched.
    """

    name: str | None = None
    root_words: list[str] | None = None
    category_id: str | None = None
    definition: str | None = None
    image_url: str | None = None
    status: str | None = None

    @classmethod
    def from_neologism(cls, record: Neologism) -> "NeologismPatch":
        """Build a patch carrying every editable field of ``record``.

        id, created_at and the derived category name are never included.
        """
        return cls(
            name=record.name,
            root_words=list(record.root_words),
            category_id=record.category_id,
            definition=record.definition,
            image_url=record.image_url,
            status=str(record.status),
        )

    def to_row(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class SessionPayload(BaseModel):
    """Token response of the password grant.

    The refresh token is ignored; sessions are not renewed.
    """

    model_config = {"extra": "ignore"}

    access_token: str
    user: dict[str, Any]

    def to_entity(self) -> AuthSession:
        return AuthSession(
            access_token=self.access_token,
            user_id=str(self.user.get("id", "")),
            email=self.user.get("email"),
        )
