import logging
from io import StringIO
from pathlib import Path
from typing import Callable, Generator, Mapping, Protocol, TypeAlias, cast

import pytest

from npdiff.cmd_base import Base
from npdiff.command import Command

NpdiffCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, StringIO]

WriteFile: TypeAlias = Callable[[str, str], None]
WriteBytes: TypeAlias = Callable[[str, bytes], None]


class NpdiffCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> "NpdiffCmdResult": ...


@pytest.fixture
def work_path(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def write_file(work_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str) -> None:
        path = work_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(contents)

    return _write_file


@pytest.fixture
def write_bytes(work_path: Path) -> WriteBytes:
    def _write_bytes(name: str, contents: bytes) -> None:
        (work_path / name).write_bytes(contents)

    return _write_bytes


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def npdiff_cmd(work_path: Path, restore_logging: None) -> NpdiffCmd:
    def _npdiff_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> NpdiffCmdResult:
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = StringIO()
        cmd = Command.execute(
            work_path,
            cast(dict[str, str], dict(env or {})),
            ["npdiff"] + list(argv),
            stdin,
            stdout,
            stderr,
        )
        return cmd, stdin, stdout, stderr

    return _npdiff_cmd
