from __future__ import annotations

from npdiff.cmd_base import Base
from npdiff.print_diff import PrintDiffMixin


class Diff(PrintDiffMixin, Base):
    def define_options(self) -> None:
        positional = []
        for arg in self.args:
            if arg.startswith("--color="):
                self.set_color(arg.split("=", 1)[1])
            elif arg == "--color":
                self.set_color("always")
            elif arg == "--no-color":
                self.set_color("never")
            else:
                positional.append(arg)

        if len(positional) != 2:
            self.fail("diff requires exactly two paths")

        self.args = positional

    def run(self) -> None:
        self.define_options()
        a_path, b_path = self.args

        a_data = self.read_text(a_path)
        b_data = self.read_text(b_path)

        try:
            changed = self.print_diff(a_path, a_data, b_path, b_data)
        except ValueError as e:
            self.fail(str(e))

        self.exit(1 if changed else 0)
