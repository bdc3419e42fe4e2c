from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from npdiff.onp import Change, diff

T = TypeVar("T")


@dataclass
class Pair(Generic[T]):
    a: Sequence[T]
    b: Sequence[T]

    def equal(self, i: int, j: int) -> bool:
        return self.a[i] == self.b[j]


def bytes_diff(a: bytes, b: bytes) -> list[Change]:
    return diff(len(a), len(b), Pair(a, b))


def ints(a: Sequence[int], b: Sequence[int]) -> list[Change]:
    return diff(len(a), len(b), Pair(a, b))


def runes(a: str | Sequence[str], b: str | Sequence[str]) -> list[Change]:
    return diff(len(a), len(b), Pair(a, b))


def strings(a: Sequence[str], b: Sequence[str]) -> list[Change]:
    return diff(len(a), len(b), Pair(a, b))


def sequences(
    a: Sequence[Any], b: Sequence[Any], key: Optional[Callable[[Any], Any]] = None
) -> list[Change]:
    if key is not None:
        a = [key(item) for item in a]
        b = [key(item) for item in b]
    return diff(len(a), len(b), Pair(a, b))
