"""Core data types for mdpick."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass
class Item:
    """A selectable entry. Identity is the name."""

    name: str
    checked: bool = False


class Catalog:
    """Ordered list of items for one run.

    Order is fixed at construction; only the checked flags change afterwards.
    """

    def __init__(self, items: Iterable[Item] | None = None):
        self._items: list[Item] = list(items or [])
        self._index: dict[str, int] = {item.name: i for i, item in enumerate(self._items)}

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Catalog:
        """Build an unchecked catalog sorted case-insensitively by name.

        Repeated names keep their first occurrence. Empty names are rejected.
        """
        seen: set[str] = set()
        unique: list[str] = []
        for name in names:
            if not name:
                raise ValueError("Catalog item names must be non-empty")
            if name in seen:
                logger.warning("Ignoring duplicate item name: %s", name)
                continue
            seen.add(name)
            unique.append(name)

        unique.sort(key=str.lower)
        return cls(Item(name=name) for name in unique)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Catalog({self._items!r})"

    def index_of(self, name: str) -> int | None:
        """Return the position of ``name`` or None if it is not in the catalog."""
        return self._index.get(name)

    def toggle(self, index: int) -> bool:
        """Flip the checked flag at ``index`` and return the new value."""
        item = self._items[index]
        item.checked = not item.checked
        return item.checked

    def names(self) -> list[str]:
        return [item.name for item in self._items]

    def checked_names(self) -> list[str]:
        """Names of checked items, in catalog order."""
        return [item.name for item in self._items if item.checked]

    def copy(self) -> Catalog:
        return Catalog(Item(name=item.name, checked=item.checked) for item in self._items)
