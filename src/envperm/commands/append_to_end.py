"""Command: add a value to the end of a variable."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envperm.commands._base import EnvPermCommand

if TYPE_CHECKING:
    from envperm.commands._context import AppContext


@click.command(
    "append-to-end",
    cls=EnvPermCommand,
    examples="""\
  envperm append-to-end PATH '$HOME/some/cooler/bin'""",
)
@click.argument("name")
@click.argument("value")
@click.pass_obj
def append_to_end(app: AppContext, name: str, value: str) -> None:
    """Write `export NAME="$NAME:VALUE"` so existing entries keep precedence."""
    app.emit(app.service.append_to_end(name, value))
