"""
crafter package

Composable, chainable builders for single values, lists and dicts, with a
conditional ("maybe") layer that lets part of a chain of calls be switched
off by a boolean or a predicate.

Key responsibilities are split across modules:
- `base.py`: the abstract `Builder` and the package errors
- `supplier.py`: deferred values (literals and nested builders)
- `value_builder.py`, `list_builder.py`, `map_builder.py`: the builder kinds
- `conditional.py`: the wrappers returned by `maybe()`
"""

from __future__ import annotations

from crafter.base import Builder, BuilderError, IncompleteBuilderError
from crafter.conditional import ConditionalBuilder, conditional_type
from crafter.list_builder import ListBuilder
from crafter.map_builder import Entry, MapBuilder
from crafter.supplier import Instance, Supplier, of_builder, of_instance, to_supplier
from crafter.value_builder import ValueBuilder

__all__ = [
    "Builder",
    "BuilderError",
    "ConditionalBuilder",
    "Entry",
    "IncompleteBuilderError",
    "Instance",
    "ListBuilder",
    "MapBuilder",
    "Supplier",
    "ValueBuilder",
    "__version__",
    "conditional_type",
    "of_builder",
    "of_instance",
    "to_supplier",
]

__version__ = "0.1.0"
