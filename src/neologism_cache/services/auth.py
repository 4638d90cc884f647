"""Authentication state shared by the entity cache and the HTTP layer."""

import logging
from collections.abc import Awaitable, Callable

from neologism_cache.entities import AuthSession
from neologism_cache.protocols import RemoteEntityService

logger = logging.getLogger(__name__)

AuthListener = Callable[[bool], Awaitable[None]]


class AuthState:
    """Holds the current session and publishes "authentication changed".

    Listeners are awaited in registration order whenever the signed-in
    identity changes, including a login as another user while a session
    is active. The entity cache registers one to reload its
    mirror, since row visibility may differ per identity.

    The local flag only short-circuits obviously unauthorized calls; the
    remote store re-validates every write.
    """

    def __init__(self, service: RemoteEntityService) -> None:
        self._service = service
        self._session: AuthSession | None = None
        self._listeners: list[AuthListener] = []

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> AuthSession | None:
        return self._session

    def subscribe(self, listener: AuthListener) -> None:
        """Register an async callback receiving the new authenticated flag."""
        self._listeners.append(listener)

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in through the remote service.

        Raises:
            UnauthenticatedError: If the credentials are rejected
            ServiceError: On any other failure
        """
        session = await self._service.sign_in(email, password)
        await self._set_session(session)
        return session

    async def sign_out(self) -> None:
        """Sign out; the local session is dropped even if the remote call fails."""
        try:
            await self._service.sign_out()
        finally:
            await self._set_session(None)

    async def restore(self) -> bool:
        """Adopt whatever session the remote service already holds."""
        await self._set_session(await self._service.current_session())
        return self.is_authenticated

    async def _set_session(self, session: AuthSession | None) -> None:
        previous_user = self._session.user_id if self._session else None
        self._session = session
        current_user = session.user_id if session else None
        if current_user == previous_user:
            return

        logger.info(
            "Authentication changed: authenticated=%s user=%s",
            self.is_authenticated,
            current_user,
        )
        for listener in self._listeners:
            await listener(self.is_authenticated)
