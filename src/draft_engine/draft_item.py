"""The single capability the engine needs from anything being drafted."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class DraftItem(Protocol):
    """Anything with a unique ``name``.

    The name is the only identity the engine uses: two items with the same
    name are the same item as far as picks, queues and waivers go.
    """

    @property
    def name(self) -> str: ...


@dataclass(frozen=True)
class NamedItem:
    """Minimal DraftItem for callers that only know the item's name."""

    name: str

    def __str__(self) -> str:
        return self.name
