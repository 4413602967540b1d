"""Small sequence helpers."""

from collections.abc import Iterable
from typing import Any


def flatten_deep(nested: Iterable[Any]) -> list[Any]:
    """Flatten arbitrarily nested lists and tuples into one flat list.

    Leaves keep their depth-first, left-to-right order. Strings and other
    non-list values are leaves; empty sequences contribute nothing.

    Example:
        flatten_deep([1, [2, [3, 4], 5], []]) -> [1, 2, 3, 4, 5]
    """
    flat: list[Any] = []
    for item in nested:
        if isinstance(item, (list, tuple)):
            flat.extend(flatten_deep(item))
        else:
            flat.append(item)
    return flat
