"""
Difference algorithm based upon S. Wu, U. Manber, G. Myers and W. Miller,
"An O(NP) Sequence Comparison Algorithm", August 1989.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

log = logging.getLogger(__name__)


@runtime_checkable
class Interface(Protocol):
    def equal(self, i: int, j: int) -> bool: ...


@dataclass(frozen=True)
class Change:
    a: int
    b: int
    deleted: int
    inserted: int


@dataclass
class Lcs:
    x: int
    y: int
    n: int
    next: Lcs | None = field(default=None, repr=False, compare=False)


@dataclass
class Point:
    y: int = -1
    lcs: Lcs | None = None


def diff(m: int, n: int, data: Interface) -> list[Change]:
    """
    Return the changes that turn the first sequence (length m) into the
    second (length n). Makes O(NP) calls to data.equal in the worst case.
    """
    return Context(m, n, data).compare()


class Context:
    def __init__(self, m: int, n: int, data: Interface):
        self.data = data
        self.xchg = n < m
        self.M, self.N = (n, m) if self.xchg else (m, n)
        self.delta = self.N - self.M
        self.fp: list[Point] = []

    def compare(self) -> list[Change]:
        self.fp = [Point() for _ in range((self.M + 1) + (self.N + 1) + 1)]

        target = self.fp[self.delta + self.M + 1]
        p = 0
        while target.y != self.N:
            for k in range(-p, self.delta):
                self.snake(k)
            for k in range(self.delta + p, self.delta, -1):
                self.snake(k)
            self.snake(self.delta)
            p += 1

        lcs, count = self.reverse(target.lcs)
        log.debug(f"compared M={self.M} N={self.N} in {p} rounds, {count} runs")

        changes: list[Change] = []
        x = y = 0
        while lcs is not None:
            if x < lcs.x or y < lcs.y:
                changes.append(self._change(x, y, lcs.x - x, lcs.y - y))
            x = lcs.x + lcs.n
            y = lcs.y + lcs.n
            lcs = lcs.next

        if x < self.M or y < self.N:
            changes.append(self._change(x, y, self.M - x, self.N - y))

        return changes

    def snake(self, k: int) -> None:
        kk = k + self.M + 1

        h = self.fp[kk - 1]
        v = self.fp[kk + 1]
        if h.y + 1 >= v.y:
            y = h.y + 1
            prev = h.lcs
        else:
            y = v.y
            prev = v.lcs

        x = y - k
        n = 0
        while x < self.M and y < self.N and self._equal(x, y):
            x += 1
            y += 1
            n += 1

        point = self.fp[kk]
        point.y = y
        point.lcs = prev if n == 0 else Lcs(x - n, y - n, n, prev)

    @staticmethod
    def reverse(curr: Lcs | None) -> tuple[Lcs | None, int]:
        count = 0
        head: Lcs | None = None
        while curr is not None:
            curr.next, head, curr = head, curr, curr.next
            count += 1
        return head, count

    def _equal(self, x: int, y: int) -> bool:
        if self.xchg:
            return self.data.equal(y, x)
        return self.data.equal(x, y)

    def _change(self, x: int, y: int, dx: int, dy: int) -> Change:
        if self.xchg:
            return Change(y, x, dy, dx)
        return Change(x, y, dx, dy)
