from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Value produced by a fail-soft operation plus the problems it repaired.

    Public helpers return only ``value``; the issues let callers and tests see which
    fallback path was taken.
    """
    value: T
    issues: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues
