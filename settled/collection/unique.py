"""
Deduplication helpers
=====================

Order-preserving duplicate removal.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .mapping import sort_and_stringify


def _marker(value: typing.Any) -> typing.Any:
    # Unhashable values (dicts, lists) compare by their normalised JSON form.
    try:
        hash(value)
    except TypeError:
        return ("json", sort_and_stringify(value))
    return value


def unique[T](items: Iterable[T], key: str | None = None) -> list[T]:
    """Keep the first entry for each value (or for each entry[key]), preserve order."""
    seen: set[typing.Any] = set()
    filtered: list[T] = []
    for entry in items:
        marker = _marker(entry[key] if key is not None else entry)  # type: ignore[index]
        if marker not in seen:
            seen.add(marker)
            filtered.append(entry)
    return filtered


def merge_without_duplicates[T](
    first: Iterable[T],
    second: Iterable[T],
    key: str | None = None,
) -> list[T]:
    """Concatenate, then drop duplicates (first occurrence wins)."""
    return unique([*first, *second], key)


def is_present(value: object) -> bool:
    return value is not None


__all__ = ("is_present", "merge_without_duplicates", "unique")
