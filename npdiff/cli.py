from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from npdiff.cmd_base import COLOR_MODES, Base
from npdiff.cmd_changes import Changes
from npdiff.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["npdiff", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="diff")
@click.option(
    "--color",
    "color",
    type=click.Choice(COLOR_MODES, case_sensitive=False),
    default="auto",
    show_default=True,
    help="Colourise the output.",
)
@click.argument("old", type=click.Path(path_type=Path))
@click.argument("new", type=click.Path(path_type=Path))
def diff_cmd(color: str, old: Path, new: Path) -> None:
    """Show line differences between two files as hunks."""
    run_cmd("diff", f"--color={color.lower()}", str(old), str(new))


@cli.command(name="changes")
@click.option(
    "--by",
    "unit",
    type=click.Choice(Changes.UNITS, case_sensitive=False),
    default="lines",
    show_default=True,
    help="Unit of comparison.",
)
@click.argument("old", type=click.Path(path_type=Path))
@click.argument("new", type=click.Path(path_type=Path))
def changes(unit: str, old: Path, new: Path) -> None:
    """Print the change records (A B DEL INS) between two files."""
    run_cmd("changes", f"--by={unit.lower()}", str(old), str(new))


if __name__ == "__main__":
    cli()
