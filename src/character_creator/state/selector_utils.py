from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def wrap_index(index: int, length: int) -> int:
    """Wrap ``index`` into ``[0, length)``; zero-length lists always yield 0."""
    if length <= 0:
        return 0
    return index % length


def cycle_id(ids: Sequence[str], current_id: str, direction: int) -> str:
    """Step through ``ids`` with wraparound.

    An id missing from the list (assets changed since it was saved) is treated as
    sitting at index 0.
    """
    if not ids:
        return current_id
    try:
        start = ids.index(current_id)
    except ValueError:
        start = 0
    return ids[wrap_index(start + direction, len(ids))]


def random_index(length: int, rng: random.Random) -> int | None:
    if length <= 0:
        return None
    return rng.randrange(length)


def random_from(items: Sequence[T], rng: random.Random) -> T | None:
    index = random_index(len(items), rng)
    if index is None:
        return None
    return items[index]
