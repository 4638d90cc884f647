"""Cache snapshot entity."""

from dataclasses import dataclass

from .category import Category
from .neologism import Neologism


@dataclass(frozen=True)
class CacheSnapshot:
    """Point-in-time view of the entity cache.

    Attributes:
        neologisms: Records, newest first
        categories: Categories, ordered by name as loaded
        loading: Whether a refresh is in flight
        latest_neologism_id: Id of the most recent creation in this session
    """

    neologisms: tuple[Neologism, ...] = ()
    categories: tuple[Category, ...] = ()
    loading: bool = False
    latest_neologism_id: str | None = None
