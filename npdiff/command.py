from __future__ import annotations

import logging
from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from npdiff.cmd_base import Base
from npdiff.cmd_changes import Changes
from npdiff.cmd_diff import Diff


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "diff": Diff,
        "changes": Changes,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        from npdiff.setup_logging import setup_logging

        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not an npdiff command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)

        level = env.get("NPDIFF_LOG_LEVEL", "WARNING")
        if not isinstance(logging.getLevelName(level.upper()), int):
            cmd.eprintln(f"npdiff: invalid NPDIFF_LOG_LEVEL {level!r}")
            cmd.status = 2
            return cmd

        setup_logging(level=level, log_file=env.get("NPDIFF_LOG_FILE"))
        cmd.execute()

        return cmd
