"""Authenticated session entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthSession:
    """Tokens and identity for a signed-in user.

    Attributes:
        access_token: Bearer token sent with every remote call
        user_id: Identifier of the signed-in user
        email: Email of the signed-in user, if known
    """

    access_token: str
    user_id: str
    email: str | None = None
