"""Handler layer for HTTP endpoints.

Handlers depend on services (the entity cache), not directly on
repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Cache) -> (Remote store)
"""

from .neologism_handler import NeologismHandler

__all__ = [
    "NeologismHandler",
]
