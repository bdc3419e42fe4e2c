from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import MutableMapping, NoReturn, TextIO

from npdiff.cmd_color import Color

log = logging.getLogger(__name__)

COLOR_MODES = ("auto", "always", "never")


class Base:
    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.status: int | None = None
        self.isatty: bool = stdout.isatty()

    def exit(self, status: int = 0) -> None:
        self.status = status
        raise ExitSignal(self.status)

    def execute(self) -> int:
        try:
            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status

        self.stdout.flush()
        self.stderr.flush()

        assert self.status is not None
        return self.status

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def expanded_path(self, path: str) -> Path:
        return (self.dir / path).absolute()

    def read_file(self, path: str) -> bytes:
        try:
            return self.expanded_path(path).read_bytes()
        except OSError as e:
            log.debug(f"reading {path!r} failed: {e}")
            self.fail(f"{path}: {e.strerror or e}")

    def read_text(self, path: str) -> str:
        data = self.read_file(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            self.fail(f"{path}: not a UTF-8 text file")

    def fail(self, message: str) -> NoReturn:
        self.eprintln(f"npdiff: {message}")
        raise ExitSignal(2)

    def set_color(self, mode: str) -> None:
        if mode not in COLOR_MODES:
            self.fail(f"invalid --color mode {mode!r}")
        if mode != "auto":
            self.isatty = mode == "always"

    def fmt(self, style: str | list[str], string: str) -> str:
        return Color.format(style, string) if self.isatty else string

    def println(self, string: str) -> None:
        if isinstance(self.stdout, io.BufferedIOBase):
            self.stdout.write((string + "\n").encode("utf-8"))
        else:
            self.stdout.write(string + "\n")

    def eprintln(self, string: str) -> None:
        if isinstance(self.stderr, io.BufferedIOBase):
            self.stderr.write((string + "\n").encode("utf-8"))
        else:
            self.stderr.write(string + "\n")


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
