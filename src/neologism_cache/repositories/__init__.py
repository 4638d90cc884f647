"""Repository layer for data access.

This layer hides the remote store behind the RemoteEntityService protocol.
The repositories are protocol-based (structural typing), not
inheritance-based: any class implementing the required methods satisfies
the protocol.
"""

from neologism_cache.protocols import RemoteEntityService

from .supabase_repository import SupabaseEntityService

__all__ = [
    "RemoteEntityService",
    "SupabaseEntityService",
]
