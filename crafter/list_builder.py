"""
list_builder.py

Responsibility: a builder for lists.

Elements are appended as suppliers and resolved, in the order they were
added, each time the list is built. Nothing is ever removed or reordered.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, TypeVar

from crafter.base import Builder
from crafter.supplier import Supplier, of_builder, of_instance, to_supplier

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ListBuilder(Builder[list[T]]):
    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._elements: list[Supplier[T]] = []
        self.add_all(elements)

    def _stage(self, suppliers: Iterable[Supplier[T]]) -> None:
        # Materialized first so a failing element leaves nothing staged.
        self._elements.extend(list(suppliers))

    def __len__(self) -> int:
        return len(self.always()._elements)  # type: ignore[attr-defined]

    def __bool__(self) -> bool:
        # A builder is never falsy, even with nothing staged.
        return True

    def add(self, element: Any) -> ListBuilder[T]:
        """
        Append an element. A builder given here is not invoked until the list
        is built, and is invoked again on every build.
        """
        self._stage((to_supplier(element),))
        return self

    def add_all(self, elements: Iterable[T]) -> ListBuilder[T]:
        """
        Append every item of an iterable (or iterator) as a literal element.
        """
        self._stage(of_instance(element) for element in elements)
        return self

    def add_builders(self, builders: Iterable[Supplier[T]]) -> ListBuilder[T]:
        """
        Append every builder of an iterable (or iterator) as a deferred element.
        """
        self._stage(of_builder(builder) for builder in builders)
        return self

    def maybe_add(self, element: Any, condition: Any) -> ListBuilder[T]:
        if condition:
            self.add(element)
        return self

    def get(self) -> list[T]:
        return self._build_list(tuple(self._elements))

    def _build_list(self, suppliers: tuple[Supplier[T], ...]) -> list[T]:
        """
        Resolve `suppliers` into the value returned by `get()`.

        Subclasses may override this to produce another collection type. Each
        supplier must be invoked exactly once, from inside this method, in order.
        """
        result = [supplier.get() for supplier in suppliers]
        logger.debug("Built list of %d element(s)", len(result))
        return result
