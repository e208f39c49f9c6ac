"""
value_builder.py

Responsibility: a builder for a single value.

The value is staged as a supplier, so it can be given either directly or as
another builder, which is not invoked until this builder's `get()` is.
A `ValueBuilder` that was never set cannot be built.
"""

from __future__ import annotations

from typing import Any, TypeVar

from crafter.base import Builder, IncompleteBuilderError
from crafter.supplier import Supplier, of_builder, to_supplier

T = TypeVar("T")

_UNSET: Any = object()


class ValueBuilder(Builder[T]):
    def __init__(self, value: Any = _UNSET) -> None:
        """
        Create a builder, seeded with `value` (a literal or a builder) if given.
        """
        self._supplier: Supplier[T] | None = None
        if value is not _UNSET:
            self.set(value)

    def _stage(self, supplier: Supplier[T]) -> None:
        self._supplier = supplier

    @property
    def is_set(self) -> bool:
        return self.always()._supplier is not None  # type: ignore[attr-defined]

    def set(self, value: Any) -> ValueBuilder[T]:
        """
        Set the value. A builder given here is invoked on each `get()`, so
        changes made to it afterwards are reflected in the built value.
        """
        self._stage(to_supplier(value))
        return self

    def set_supplier(self, supplier: Supplier[T]) -> ValueBuilder[T]:
        self._stage(of_builder(supplier))
        return self

    def maybe_set(self, value: Any, condition: Any) -> ValueBuilder[T]:
        if condition:
            self.set(value)
        return self

    def get(self) -> T:
        if self._supplier is None:
            raise IncompleteBuilderError("Builder value has not yet been set.")
        return self._supplier.get()
