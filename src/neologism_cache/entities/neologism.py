"""Neologism domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class NeologismStatus(str, Enum):
    """Workflow states known to this client.

    Records keep the raw status string, so a state added on the server
    side still round-trips through the cache unchanged.
    """

    DRAFT = "Draft"
    READY = "Ready"
    ARCHIVED = "Archived"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Neologism:
    """Canonical neologism record as returned by the remote store.

    Attributes:
        id: Identifier assigned by the remote store
        name: The invented word
        root_words: Words the neologism is built from, in order
        category_id: Referenced category id, if any
        category: Category name projected from category_id on every read
        definition: Meaning of the word
        image_url: Optional illustration
        status: Workflow state (see NeologismStatus)
        created_at: Creation time assigned by the remote store
    """

    id: str
    name: str
    root_words: tuple[str, ...]
    category_id: str | None
    category: str | None
    definition: str
    image_url: str | None
    status: str
    created_at: datetime


@dataclass(frozen=True)
class NeologismDraft:
    """Caller-supplied fields for a neologism that does not exist yet.

    There is no id, created_at or category here: the remote store owns them.
    """

    name: str
    definition: str
    root_words: tuple[str, ...] = field(default_factory=tuple)
    category_id: str | None = None
    image_url: str | None = None
    status: str = NeologismStatus.DRAFT.value
