"""
map_builder.py

Responsibility: a builder for dicts.

Key/value pairs are staged in order, without deduplication, and replayed
into a fresh dict on each build. Putting a key again overrides the earlier
value, but every staged value is still resolved exactly once, in staging
order, so side effects of value builders happen in the order they were put.
Keys keep the position of their first occurrence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Hashable, TypeVar

from crafter.base import Builder
from crafter.supplier import Supplier, of_instance, to_supplier

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    key: K
    supplier: Supplier[V]


class MapBuilder(Builder[dict[K, V]]):
    def __init__(self, mapping: Mapping[K, V] | None = None) -> None:
        self._entries: list[Entry[K, V]] = []
        if mapping is not None:
            self.put_all(mapping)

    def _stage(self, entries: Iterable[Entry[K, V]]) -> None:
        self._entries.extend(list(entries))

    def put(self, key: K, value: Any) -> MapBuilder[K, V]:
        """
        Put `value` (a literal or a builder) at `key`. A builder given here is
        not invoked until the map is built.
        """
        self._stage((Entry(key, to_supplier(value)),))
        return self

    def put_all(self, items: Mapping[K, V] | Iterable[tuple[K, V]]) -> MapBuilder[K, V]:
        pairs = items.items() if isinstance(items, Mapping) else items
        self._stage(Entry(key, of_instance(value)) for key, value in pairs)
        return self

    def maybe_put(self, key: K, value: Any, condition: Any) -> MapBuilder[K, V]:
        if condition:
            self.put(key, value)
        return self

    def get(self) -> dict[K, V]:
        return self._build_map(tuple(self._entries))

    def _build_map(self, entries: tuple[Entry[K, V], ...]) -> dict[K, V]:
        # Overridable, like ListBuilder._build_list.
        result: dict[K, V] = {}
        for entry in entries:
            result[entry.key] = entry.supplier.get()
        logger.debug("Built map of %d key(s) from %d entries", len(result), len(entries))
        return result
