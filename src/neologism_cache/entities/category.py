"""Category domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A named grouping of neologisms.

    Attributes:
        id: Identifier assigned by the remote store
        name: Display name, unique across categories
    """

    id: str
    name: str
