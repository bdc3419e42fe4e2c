from __future__ import annotations

from typing import MutableMapping

from npdiff.edits import Edit
from npdiff.hunk import Hunk
from npdiff.line_diff import diff_hunks

DIFF_FORMATS: dict[str, str] = {
    "context": "normal",
    "meta": "bold",
    "frag": "cyan",
    "old": "red",
    "new": "green",
}

EDIT_FORMATS: dict[str, str] = {
    "eql": "context",
    "ins": "new",
    "del": "old",
}


class PrintDiffMixin:
    env: MutableMapping[str, str]

    def diff_fmt(self, name: str, text: str) -> str:
        key = f"NPDIFF_COLOR_DIFF_{name.upper()}"
        style = self.env.get(key) or DIFF_FORMATS[name]
        return self.fmt(style.split(), text)

    def print_diff(self, a_path: str, a_data: str, b_path: str, b_data: str) -> bool:
        hunks = diff_hunks(a_data, b_data)
        if not hunks:
            return False

        self._header(f"--- {a_path}")
        self._header(f"+++ {b_path}")

        for hunk in hunks:
            self.print_diff_hunk(hunk)

        return True

    def print_diff_hunk(self, hunk: Hunk) -> None:
        self.println(self.diff_fmt("frag", hunk.header()))
        for edit in hunk.edits:
            self.print_diff_edit(edit)

    def print_diff_edit(self, edit: Edit) -> None:
        self.println(self.diff_fmt(EDIT_FORMATS[edit.ty], str(edit)))

    def _header(self, string: str) -> None:
        self.println(self.diff_fmt("meta", string))
