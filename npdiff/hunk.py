from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from npdiff.edits import Edit, Line

HUNK_CONTEXT = 3


@dataclass
class Hunk:
    a_start: Optional[int]
    b_start: Optional[int]
    edits: List[Edit] = field(default_factory=list)

    @staticmethod
    def filter(edits: Sequence[Edit]) -> List[Hunk]:
        hunks: List[Hunk] = []
        offset = 0

        while True:
            while offset < len(edits) and edits[offset].ty == "eql":
                offset += 1

            if offset >= len(edits):
                return hunks

            offset -= HUNK_CONTEXT + 1

            if offset < 0:
                hunk = Hunk(a_start=None, b_start=None)
            else:
                a_line, b_line = edits[offset].a_line, edits[offset].b_line
                hunk = Hunk(
                    a_start=a_line.number if a_line else None,
                    b_start=b_line.number if b_line else None,
                )
            hunks.append(hunk)

            offset = Hunk._build(hunk, edits, offset)

    @staticmethod
    def _build(hunk: Hunk, edits: Sequence[Edit], offset: int) -> int:
        counter = -1

        while counter != 0:
            if offset >= 0 and counter > 0:
                hunk.edits.append(edits[offset])

            offset += 1
            if offset >= len(edits):
                break

            ahead = offset + HUNK_CONTEXT
            if ahead < len(edits) and edits[ahead].ty in ("ins", "del"):
                counter = 2 * HUNK_CONTEXT + 1
            else:
                counter -= 1

        return offset

    def header(self) -> str:
        a_offset = self._format("-", [e.a_line for e in self.edits], self.a_start)
        b_offset = self._format("+", [e.b_line for e in self.edits], self.b_start)
        return f"@@ {a_offset} {b_offset} @@"

    def _format(
        self, sign: str, lines: Sequence[Optional[Line]], start: Optional[int]
    ) -> str:
        present = [ln for ln in lines if ln is not None]
        start_val = present[0].number if present else start

        if start_val is None:
            start_val = 0

        return f"{sign}{start_val},{len(present)}"
