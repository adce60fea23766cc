"""
Mapping helpers
===============

Build, flatten and normalise mappings.
"""

from __future__ import annotations

import json
import typing
from collections.abc import Iterable, Mapping, MutableMapping


def index_by[T](
    items: Iterable[T],
    key: str | None = None,
    result: MutableMapping[typing.Any, T] | None = None,
) -> MutableMapping[typing.Any, T]:
    """
    Index entries by one of their fields, or by the entry itself.

    Example:
        index_by([{"id": 10, "name": "A"}, {"id": 11, "name": "B"}], "id")
        # {10: {"id": 10, "name": "A"}, 11: {"id": 11, "name": "B"}}

    Later entries win on duplicate keys. Pass `result` to fill an existing mapping.
    """
    target: MutableMapping[typing.Any, T] = {} if result is None else result
    for entry in items:
        target[entry[key] if key is not None else entry] = entry  # type: ignore[index]
    return target


def values_of[V](mapping: Mapping[typing.Any, V]) -> list[V]:
    """Values of a mapping, keys dropped."""
    return list(mapping.values())


def sort_properties(value: typing.Any) -> typing.Any:
    """
    Sort the keys of a mapping and of every mapping nested in it.

    Only mapping values are followed: lists are neither sorted nor walked,
    scalars come back unchanged.
    """
    if isinstance(value, Mapping):
        return {k: sort_properties(value[k]) for k in sorted(value)}
    return value


def sort_and_stringify(value: typing.Any) -> str:
    """Compact JSON with sorted keys: {"b": 2, "a": 1} -> '{"a":1,"b":2}'."""
    return json.dumps(sort_properties(value), separators=(",", ":"), default=str)


__all__ = ("index_by", "sort_and_stringify", "sort_properties", "values_of")
