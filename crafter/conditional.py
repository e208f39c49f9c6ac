"""
conditional.py

Responsibility: the "maybe" mechanism shared by every builder kind.

`ConditionalBuilder` is placed in front of a concrete builder kind (see
`conditional_type`), so a wrapper exposes exactly the same methods as the
builder it wraps. Every public mutator of a kind goes through `_stage`, and
the wrapper overrides only that primitive plus navigation and `get()`:

- discard wrapper (no predicate): every mutation is a no-op.
- predicate wrapper: a mutation is forwarded to the root builder iff every
  enclosing level is active and the predicate returns truthy. Outer levels
  are checked first, so an inner predicate is never called while an outer
  level is off.

Wrappers hold references to the root (`always`) and to the level they were
created from (`parent`); the root never references its wrappers.
"""

from __future__ import annotations

import logging
import types
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from crafter.base import Builder, Condition

logger = logging.getLogger(__name__)


class ConditionalBuilder:
    """Gates the `_stage` primitive of the builder kind it is mixed into."""

    def __init__(
        self,
        always: Builder[Any],
        parent: Builder[Any],
        predicate: Callable[[], Any] | None = None,
    ) -> None:
        # The kind's own __init__ is not run: a wrapper owns no staged state.
        self._always = always
        self._parent = parent
        self._predicate = predicate

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes the kind's __init__ sets on the root.
        # Mutations must still go through _stage to be gated.
        try:
            always = self.__dict__["_always"]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(always, name)

    @property
    def discards(self) -> bool:
        """True for a wrapper that never applies mutations."""
        return self._predicate is None

    def _is_active(self) -> bool:
        if self._predicate is None:
            return False
        return self._parent._is_active() and bool(self._predicate())

    def _stage(self, *args: Any) -> None:
        if self._is_active():
            self._always._stage(*args)
        else:
            logger.debug("Skipped mutation on inactive %s", type(self).__name__)

    def get(self) -> Any:
        return self._always.get()

    def always(self) -> Builder[Any]:
        return self._always

    def end_maybe(self) -> Builder[Any]:
        return self._parent

    def maybe(self, condition: Condition) -> Builder[Any]:
        if self._predicate is None:
            # Once a level is off, nothing nested below it can be on.
            return discard(self)
        return super().maybe(condition)  # type: ignore[misc]

    def __repr__(self) -> str:
        mode = "discard" if self.discards else "predicate"
        return f"<{type(self).__name__} {mode} always={self._always!r}>"


def conditional_type(kind: type) -> type:
    """
    Return the conditional wrapper class for a builder kind.

    The class is created once per kind and stored on the kind itself, so it
    goes away together with the kind. Because the wrapper subclasses `kind`,
    methods that user subclasses add to a kind are gated too, as long as they
    mutate through `_stage`.
    """
    # Looked up in the kind's own __dict__: a subclass must not reuse its base's wrapper.
    cached = kind.__dict__.get("_conditional_type")
    if cached is None:
        cached = types.new_class(
            f"Conditional{kind.__name__}",
            (ConditionalBuilder, kind),
            exec_body=lambda ns: ns.update({"__module__": kind.__module__}),
        )
        kind._conditional_type = cached  # type: ignore[attr-defined]
    return cached


def _wrap(current: Builder[Any], predicate: Callable[[], Any] | None) -> Builder[Any]:
    root = current.always()
    wrapper = conditional_type(type(root))(root, current, predicate)
    logger.debug("Entered %r from %r", wrapper, current)
    return wrapper


def discard(current: Builder[Any]) -> Builder[Any]:
    """Return a wrapper one level below `current` that discards all mutations."""
    return _wrap(current, None)


def guard(current: Builder[Any], predicate: Callable[[], Any]) -> Builder[Any]:
    """Return a wrapper one level below `current` gated by `predicate`."""
    return _wrap(current, predicate)
