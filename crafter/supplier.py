"""
supplier.py

Responsibility: deferred values.

A supplier is anything with a zero-argument `get()`. Builders stage suppliers
rather than values so that a literal and a not-yet-built child builder are
handled by the same code. Suppliers are never memoized: a child builder is
asked for its value again on every build of its parent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from crafter.base import Builder

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Supplier(Protocol[T_co]):
    def get(self) -> T_co: ...


@dataclass(frozen=True)
class Instance(Generic[T]):
    """A supplier that always returns the same value."""

    value: T

    def get(self) -> T:
        return self.value


def of_instance(value: T) -> Instance[T]:
    return Instance(value)


def of_builder(builder: Supplier[T]) -> Supplier[T]:
    """
    Use `builder` itself as a supplier; its `get()` runs on every resolution.
    """
    if builder is None:
        raise TypeError(
            "Builder cannot be None. To stage a None value, supply a None value instead of a None builder."
        )
    if not isinstance(builder, Supplier):
        raise TypeError(f"Expected an object with a get() method, got {type(builder).__name__}")
    return builder


def to_supplier(item: Any) -> Supplier[Any]:
    """Stage builders as deferred values and everything else as literals."""
    if isinstance(item, Builder):
        return of_builder(item)
    return of_instance(item)
