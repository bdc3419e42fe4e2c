from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from npdiff.onp import Change

SYMBOLS: dict[str, str] = {
    "eql": " ",
    "ins": "+",
    "del": "-",
}


@dataclass
class Line:
    number: int
    text: str


@dataclass
class Edit:
    ty: str
    a_line: Line | None = None
    b_line: Line | None = None

    def __str__(self) -> str:
        line = self.a_line or self.b_line
        assert line is not None
        return SYMBOLS[self.ty] + line.text


def expand(changes: Sequence[Change], a: list[Line], b: list[Line]) -> list[Edit]:
    edits: list[Edit] = []
    x = y = 0

    def common(end: int) -> None:
        nonlocal x, y
        while x < end:
            edits.append(Edit("eql", a[x], b[y]))
            x += 1
            y += 1

    for change in changes:
        common(change.a)

        for _ in range(change.deleted):
            edits.append(Edit("del", a[x], None))
            x += 1

        for _ in range(change.inserted):
            edits.append(Edit("ins", None, b[y]))
            y += 1

    common(len(a))
    return edits
