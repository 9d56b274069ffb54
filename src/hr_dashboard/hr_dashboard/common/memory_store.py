from __future__ import annotations

import itertools
from dataclasses import replace
from typing import Callable, Generic, Iterable, Optional, Sequence, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


class InMemoryStore(Generic[T]):
    """Owned, insertion-ordered collection of frozen dataclasses keyed by id.

    Updates replace the stored object, so snapshots handed out earlier never
    change under the caller.
    """

    def __init__(self, key: Callable[[T], str], *, id_prefix: str, items: Iterable[T] = ()):
        self._key = key
        self._id_prefix = id_prefix
        self._items: dict[str, T] = {}
        self._ids = itertools.count(1)
        for item in items:
            self.add(item)

    def next_id(self) -> str:
        while True:
            candidate = f"{self._id_prefix}-{next(self._ids)}"
            if candidate not in self._items:
                return candidate

    def list_all(self) -> Sequence[T]:
        return list(self._items.values())

    def get_by_id(self, item_id: str) -> Optional[T]:
        return self._items.get(item_id)

    def add(self, item: T) -> T:
        item_id = self._key(item)
        if item_id in self._items:
            raise ValidationError(f"Duplicate id: {item_id}")
        self._items[item_id] = item
        return item

    def update(self, item_id: str, **changes) -> Optional[T]:
        current = self._items.get(item_id)
        if current is None:
            return None
        updated = replace(current, **changes)
        self._items[item_id] = updated
        return updated

    def delete_by_id(self, item_id: str) -> bool:
        return self._items.pop(item_id, None) is not None
