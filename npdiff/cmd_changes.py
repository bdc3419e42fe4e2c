from __future__ import annotations

import logging
from typing import Callable

from npdiff import adapters
from npdiff.cmd_base import Base
from npdiff.onp import Change

log = logging.getLogger(__name__)


class Changes(Base):
    UNITS = ("lines", "words", "chars", "bytes", "ints")

    def define_options(self) -> None:
        self.unit = "lines"

        positional = []
        for arg in self.args:
            if arg.startswith("--by="):
                self.unit = arg.split("=", 1)[1]
            else:
                positional.append(arg)

        if self.unit not in Changes.UNITS:
            self.fail(f"unknown unit {self.unit!r}")
        if len(positional) != 2:
            self.fail("changes requires exactly two paths")

        self.args = positional

    def run(self) -> None:
        self.define_options()
        a_path, b_path = self.args

        compare: Callable[[str, str], list[Change]] = getattr(self, f"_by_{self.unit}")
        changes = compare(a_path, b_path)
        log.debug(f"{len(changes)} changes between {a_path} and {b_path}")

        for change in changes:
            self.println(
                f"{change.a} {change.b} {change.deleted} {change.inserted}"
            )

        self.exit(1 if changes else 0)

    def _by_lines(self, a_path: str, b_path: str) -> list[Change]:
        return adapters.strings(
            self.read_text(a_path).splitlines(), self.read_text(b_path).splitlines()
        )

    def _by_words(self, a_path: str, b_path: str) -> list[Change]:
        return adapters.strings(
            self.read_text(a_path).split(), self.read_text(b_path).split()
        )

    def _by_chars(self, a_path: str, b_path: str) -> list[Change]:
        return adapters.runes(self.read_text(a_path), self.read_text(b_path))

    def _by_bytes(self, a_path: str, b_path: str) -> list[Change]:
        return adapters.bytes_diff(self.read_file(a_path), self.read_file(b_path))

    def _by_ints(self, a_path: str, b_path: str) -> list[Change]:
        return adapters.ints(self._read_ints(a_path), self._read_ints(b_path))

    def _read_ints(self, path: str) -> list[int]:
        try:
            return [int(token) for token in self.read_text(path).split()]
        except ValueError as e:
            self.fail(f"{path}: {e}")
