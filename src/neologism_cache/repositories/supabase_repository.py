"""Supabase implementation of RemoteEntityService.

Talks to the PostgREST endpoints (``/rest/v1``) for categories and
neologisms and to the auth endpoints (``/auth/v1``) for sessions. It's the
default implementation and satisfies the RemoteEntityService protocol.

Requirements:
    - A Supabase project (or local stack via ``supabase start``)
    - ``SUPABASE_URL`` and ``SUPABASE_ANON_KEY`` in the environment
    - Tables ``categories(id, name)`` and ``neologisms(id, name, root_words,
      category_id, definition, image_url, status, user_id, created_at)``
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from neologism_cache.config import settings
from neologism_cache.dto import (
    CategoryRow,
    NeologismInsert,
    NeologismPatch,
    NeologismRow,
    SessionPayload,
)
from neologism_cache.entities import AuthSession, Category, Neologism, NeologismDraft
from neologism_cache.errors import NotFoundError, ServiceError, UnauthenticatedError

logger = logging.getLogger(__name__)

NEOLOGISM_SELECT = "*,category:categories(name)"

# PostgREST media type for "exactly one row"
SINGLE_OBJECT = "application/vnd.pgrst.object+json"

# PostgREST error code when a single-object request matched no rows
NO_ROWS_CODE = "PGRST116"


class SupabaseEntityService:
    """Supabase/PostgREST implementation of the RemoteEntityService protocol.

    This class satisfies the protocol through structural typing - no
    explicit inheritance needed.

    The anon key identifies the project; the session access token, once
    signed in, identifies the user. Row-level security on the server is the
    real authority for every write.

    Example:
        ```python
        service = SupabaseEntityService.create()
        await service.sign_in("ada@example.com", "secret")
        words = await service.list_neologisms()
        await service.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        anon_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Supabase entity service.

        Args:
            base_url: Supabase project URL. Defaults to settings.supabase_url.
            anon_key: Project anon key. Defaults to settings.supabase_anon_key.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout.
            transport: Optional httpx transport (used by tests).
        """
        self._base_url = (base_url or settings.supabase_url).rstrip("/")
        self._anon_key = anon_key if anon_key is not None else settings.supabase_anon_key
        self._timeout = timeout or settings.request_timeout
        self._transport = transport
        self._session: AuthSession | None = None
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        anon_key: str | None = None,
    ) -> "SupabaseEntityService":
        """Factory method to create SupabaseEntityService with defaults.

        Args:
            base_url: Project URL. If None, uses settings.
            anon_key: Anon key. If None, uses settings.

        Returns:
            Configured SupabaseEntityService
        """
        return cls(base_url=base_url, anon_key=anon_key)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    def _headers(self, **extra: str) -> dict[str, str]:
        token = self._session.access_token if self._session else self._anon_key
        headers = {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {token}",
        }
        headers.update(extra)
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (or None).

        Raises:
            UnauthenticatedError: On 401/403
            NotFoundError: On 404, or a single-object request with no rows
            ServiceError: On any other HTTP, transport or decoding failure
        """
        try:
            response = await self.client.request(
                method,
                path,
                params=params,
                json=json,
                headers=headers or self._headers(),
            )
        except httpx.HTTPError as e:
            raise ServiceError(f"{method} {path} failed: {e}") from e

        if response.status_code in (401, 403):
            raise UnauthenticatedError(f"{method} {path} rejected: {response.text}")
        if response.status_code == 404 or (
            response.status_code == 406 and NO_ROWS_CODE in response.text
        ):
            raise NotFoundError(f"{method} {path}: no matching record")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ServiceError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServiceError(f"{method} {path} returned malformed JSON") from e

    @staticmethod
    def _parse_neologism(data: Any) -> Neologism:
        try:
            return NeologismRow.model_validate(data).to_entity()
        except ValidationError as e:
            raise ServiceError(f"Malformed neologism row: {e}") from e

    @staticmethod
    def _parse_category(data: Any) -> Category:
        try:
            return CategoryRow.model_validate(data).to_entity()
        except ValidationError as e:
            raise ServiceError(f"Malformed category row: {e}") from e

    async def _require_user(self) -> dict[str, Any]:
        user = await self.current_user()
        if not user:
            raise UnauthenticatedError("User must be authenticated")
        return user

    # ------------------------------------------------------------------
    # Neologisms
    # ------------------------------------------------------------------

    async def list_neologisms(self) -> list[Neologism]:
        """Fetch all visible neologisms, newest first."""
        data = await self._request(
            "GET",
            "/rest/v1/neologisms",
            params={"select": NEOLOGISM_SELECT, "order": "created_at.desc"},
        )
        if not isinstance(data, list) and data is not None:
            raise ServiceError("Expected a list of neologisms")
        return [self._parse_neologism(item) for item in data or []]

    async def get_neologism_by_id(self, neologism_id: str) -> Neologism:
        """Fetch a single neologism by id."""
        data = await self._request(
            "GET",
            "/rest/v1/neologisms",
            params={"select": NEOLOGISM_SELECT, "id": f"eq.{neologism_id}"},
            headers=self._headers(Accept=SINGLE_OBJECT),
        )
        return self._parse_neologism(data)

    async def create_neologism(self, draft: NeologismDraft) -> Neologism:
        """Insert a neologism owned by the signed-in user."""
        user = await self._require_user()
        payload = NeologismInsert.from_draft(draft, user_id=str(user["id"]))
        data = await self._request(
            "POST",
            "/rest/v1/neologisms",
            params={"select": NEOLOGISM_SELECT},
            json=payload.model_dump(),
            headers=self._headers(Accept=SINGLE_OBJECT, Prefer="return=representation"),
        )
        logger.debug("Created neologism %s", data.get("id") if isinstance(data, dict) else data)
        return self._parse_neologism(data)

    async def update_neologism(self, neologism_id: str, changes: NeologismPatch) -> Neologism:
        """Apply only the supplied fields to a neologism."""
        await self._require_user()
        data = await self._request(
            "PATCH",
            "/rest/v1/neologisms",
            params={"select": NEOLOGISM_SELECT, "id": f"eq.{neologism_id}"},
            json=changes.to_row(),
            headers=self._headers(Accept=SINGLE_OBJECT, Prefer="return=representation"),
        )
        return self._parse_neologism(data)

    async def delete_neologism(self, neologism_id: str) -> None:
        """Delete a neologism; an empty representation means nothing matched."""
        await self._require_user()
        data = await self._request(
            "DELETE",
            "/rest/v1/neologisms",
            params={"id": f"eq.{neologism_id}"},
            headers=self._headers(Prefer="return=representation"),
        )
        if not data:
            raise NotFoundError(f"Neologism {neologism_id} does not exist")

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self) -> list[Category]:
        """Fetch all categories ordered by name."""
        data = await self._request(
            "GET",
            "/rest/v1/categories",
            params={"select": "*", "order": "name"},
        )
        if not isinstance(data, list) and data is not None:
            raise ServiceError("Expected a list of categories")
        return [self._parse_category(item) for item in data or []]

    async def create_category(self, name: str) -> Category:
        """Insert a category."""
        data = await self._request(
            "POST",
            "/rest/v1/categories",
            params={"select": "*"},
            json={"name": name},
            headers=self._headers(Accept=SINGLE_OBJECT, Prefer="return=representation"),
        )
        return self._parse_category(data)

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def current_user(self) -> dict[str, Any] | None:
        """Return the user behind the current access token, if any."""
        if self._session is None:
            return None
        try:
            data = await self._request("GET", "/auth/v1/user")
        except UnauthenticatedError:
            return None
        return data or None

    async def current_session(self) -> AuthSession | None:
        return self._session

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Start a session using the password grant."""
        try:
            data = await self._request(
                "POST",
                "/auth/v1/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
                headers={"apikey": self._anon_key},
            )
        except ServiceError as e:
            # The auth server answers bad credentials with 400
            if isinstance(e.__cause__, httpx.HTTPStatusError) and e.__cause__.response.status_code == 400:
                raise UnauthenticatedError("Invalid login credentials") from e
            raise
        try:
            self._session = SessionPayload.model_validate(data).to_entity()
        except ValidationError as e:
            raise ServiceError(f"Malformed session payload: {e}") from e
        logger.info("Signed in as %s", self._session.email or self._session.user_id)
        return self._session

    async def sign_out(self) -> None:
        """End the current session locally and on the server."""
        if self._session is None:
            return
        try:
            await self._request("POST", "/auth/v1/logout")
        finally:
            self._session = None

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
