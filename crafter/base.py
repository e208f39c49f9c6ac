"""
base.py

Responsibility: the abstract builder every builder kind derives from.

A builder is configured step by step and then resolved by `get()`. Each kind
funnels all of its mutating methods through one `_stage` primitive; that is
the only method the conditional wrappers in `conditional.py` need to gate in
order to switch a whole chain of calls on or off.

Navigation (`always`, `end_maybe`, `maybe`) lives here so that root builders
and conditional wrappers answer it through the same method names.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from crafter.conditional import discard, guard

T = TypeVar("T")
B = TypeVar("B", bound="Builder[Any]")

Condition = bool | Callable[[], Any]


class BuilderError(RuntimeError):
    pass


class IncompleteBuilderError(BuilderError):
    """Raised by `get()` when a builder has not been given everything it needs."""


class Builder(ABC, Generic[T]):
    """
    Base class for builders of `T`.

    Any builder can be staged into another builder as a deferred value; the
    outer builder calls its `get()` each time the outer builder is built.
    Classes that cannot subclass this may be registered with
    `Builder.register(cls)` instead.
    """

    @abstractmethod
    def get(self) -> T:
        """Build and return a value from the current state of this builder."""

    def _stage(self, *args: Any) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not stage values")

    def _is_active(self) -> bool:
        return True

    def apply(self: B, fn: Callable[[B], object]) -> B:
        """
        Call `fn` with this builder and return this builder.

        The return value of `fn` is ignored. This allows arbitrary configuration
        code in the middle of a chain of calls.
        """
        fn(self)
        return self

    def always(self) -> Builder[T]:
        """Return the root, unconditioned builder. A root returns itself."""
        return self

    def end_maybe(self) -> Builder[T]:
        """Return the builder one conditional level up. A root returns itself."""
        return self

    def maybe(self, condition: Condition) -> Builder[T]:
        """
        Return a builder whose mutations apply only if `condition` holds.

        - A truthy value returns this builder unchanged.
        - A falsy value returns a wrapper that discards every mutation.
        - A zero-argument callable returns a wrapper that calls it on every
          mutating call and applies the mutation only if it returns truthy.

        Nested `maybe()` calls combine with AND semantics.

        Raises:
            TypeError: If the root builder does not implement `_stage`, since
                its mutations could not be gated.
        """
        if type(self.always())._stage is Builder._stage:
            raise TypeError(
                f"{type(self.always()).__name__} does not stage values through _stage() "
                "and cannot be used with maybe()"
            )
        if callable(condition):
            return guard(self, condition)
        if condition:
            return self
        return discard(self)
