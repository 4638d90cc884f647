"""Remote entity service protocol.

Defines the interface for the durable store of categories and neologisms,
plus the authentication oracle the store uses to authorize writes.

Implementations can include:
- Supabase / PostgREST over HTTP (default)
- An in-memory fake for tests
- Any other backend that returns canonical records
"""

from typing import Any, Protocol, runtime_checkable

from neologism_cache.dto import NeologismPatch
from neologism_cache.entities import AuthSession, Category, Neologism, NeologismDraft


@runtime_checkable
class RemoteEntityService(Protocol):
    """Protocol for the remote store behind the entity cache.

    Every method may fail with one of the errors in ``neologism_cache.errors``.
    Records returned by a successful call are canonical: ids, creation
    timestamps and category names are assigned by the store.
    """

    async def list_neologisms(self) -> list[Neologism]:
        """Return all visible neologisms, newest first.

        Raises:
            ServiceError: If the store cannot be read
        """
        ...

    async def get_neologism_by_id(self, neologism_id: str) -> Neologism:
        """Return a single neologism.

        Raises:
            NotFoundError: If no record has that id
            ServiceError: On any other failure
        """
        ...

    async def create_neologism(self, draft: NeologismDraft) -> Neologism:
        """Create a neologism for the signed-in user.

        Raises:
            UnauthenticatedError: If there is no signed-in user
            ServiceError: On any other failure
        """
        ...

    async def update_neologism(self, neologism_id: str, changes: NeologismPatch) -> Neologism:
        """Apply the supplied fields to an existing neologism.

        Raises:
            UnauthenticatedError: If there is no signed-in user
            NotFoundError: If no record has that id
            ServiceError: On any other failure
        """
        ...

    async def delete_neologism(self, neologism_id: str) -> None:
        """Delete a neologism.

        Raises:
            UnauthenticatedError: If there is no signed-in user
            NotFoundError: If no record has that id
            ServiceError: On any other failure
        """
        ...

    async def list_categories(self) -> list[Category]:
        """Return all categories ordered by name."""
        ...

    async def create_category(self, name: str) -> Category:
        """Create a category."""
        ...

    async def current_user(self) -> dict[str, Any] | None:
        """Return the identity behind the current session, if any."""
        ...

    async def current_session(self) -> AuthSession | None:
        """Return the current session, if any."""
        ...

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Start a session with email and password.

        Raises:
            UnauthenticatedError: If the credentials are rejected
        """
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...
