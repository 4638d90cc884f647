"""Error taxonomy for remote entity operations.

The repository layer raises these; the entity cache catches them at its
boundary and turns each one into a single notification.
"""


class NeologismCacheError(Exception):
    """Base exception for all neologism-cache errors."""

    kind = "error"


class UnauthenticatedError(NeologismCacheError):
    """The caller has no valid session (local gate or remote rejection)."""

    kind = "unauthenticated"


class NotFoundError(NeologismCacheError):
    """The requested record does not exist in the remote store."""

    kind = "not_found"


class ServiceError(NeologismCacheError):
    """Any other remote failure: network, server, malformed response."""

    kind = "service"
