"""Derived views over a cache snapshot.

Every function here is pure: it reads the sequence it is given, never
mutates it and never touches the network. Results keep the input order,
which for the entity cache is newest first.
"""

import random
from collections.abc import Sequence

from neologism_cache.entities import Neologism, NeologismStatus

# Filter values meaning "do not filter"
NO_FILTER = frozenset({"", "all"})


def search_neologisms(neologisms: Sequence[Neologism], query: str | None) -> list[Neologism]:
    """Case-insensitive substring search over name, definition and root words.

    An empty or missing query returns every record.
    """
    if not query:
        return list(neologisms)

    needle = query.lower()
    return [
        n
        for n in neologisms
        if needle in n.name.lower()
        or needle in n.definition.lower()
        or any(needle in word.lower() for word in n.root_words)
    ]


def filter_by_category(neologisms: Sequence[Neologism], category_id: str | None) -> list[Neologism]:
    """Keep records filed under ``category_id``; ``""`` and ``"all"`` keep everything."""
    if category_id is None or category_id in NO_FILTER:
        return list(neologisms)
    return [n for n in neologisms if n.category_id == category_id]


def filter_by_status(neologisms: Sequence[Neologism], status: str | None) -> list[Neologism]:
    """Keep records in workflow state ``status``; ``""`` and ``"all"`` keep everything."""
    if status is None or status in NO_FILTER:
        return list(neologisms)
    return [n for n in neologisms if n.status == status]


def get_latest_neologism(neologisms: Sequence[Neologism]) -> Neologism | None:
    """Return the newest record, relying on the newest-first ordering."""
    return neologisms[0] if neologisms else None


def get_random_neologism(
    neologisms: Sequence[Neologism],
    sticky_id: str | None = None,
    rng: random.Random | None = None,
) -> Neologism | None:
    """Pick the featured neologism.

    While ``sticky_id`` names a record that is still present, that record
    is returned every time. Otherwise one ``Ready`` record is sampled
    uniformly; None if there is none.

    Args:
        neologisms: Records to choose from
        sticky_id: Id of the session's most recent creation, if any
        rng: Random source. Defaults to the module-level ``random``.
    """
    if sticky_id:
        for n in neologisms:
            if n.id == sticky_id:
                return n

    ready = [n for n in neologisms if n.status == NeologismStatus.READY]
    if not ready:
        return None
    return (rng or random).choice(ready)
