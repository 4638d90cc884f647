"""Data Transfer Objects for wire and API contracts.

These Pydantic models define the external contracts:
- records: rows exchanged with the remote store (snake_case columns)
- requests / responses: the HTTP API served by the api package

Internal logic should use entities from the entities package.
"""

from .records import CategoryRow, NeologismInsert, NeologismPatch, NeologismRow, SessionPayload
from .requests import (
    CreateCategoryRequest,
    CreateNeologismRequest,
    LoginRequest,
    StatusUpdateRequest,
    UpdateNeologismRequest,
)
from .responses import (
    CategoryItem,
    HealthCheckResponse,
    MutationResponse,
    NeologismItem,
    NotificationItem,
)

__all__ = [
    # Remote store rows
    "CategoryRow",
    "NeologismInsert",
    "NeologismPatch",
    "NeologismRow",
    "SessionPayload",
    # API requests
    "CreateCategoryRequest",
    "CreateNeologismRequest",
    "LoginRequest",
    "StatusUpdateRequest",
    "UpdateNeologismRequest",
    # API responses
    "CategoryItem",
    "HealthCheckResponse",
    "MutationResponse",
    "NeologismItem",
    "NotificationItem",
]
