"""Command: add a value to the front of a variable (e.g. PATH)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envperm.commands._base import EnvPermCommand

if TYPE_CHECKING:
    from envperm.commands._context import AppContext


@click.command(
    cls=EnvPermCommand,
    examples="""\
  envperm append PATH '$HOME/some/cool/bin'
  envperm append PYTHONPATH /opt/lib/python""",
)
@click.argument("name")
@click.argument("value")
@click.pass_obj
def append(app: AppContext, name: str, value: str) -> None:
    """Write `export NAME="VALUE:$NAME"` so VALUE takes precedence."""
    app.emit(app.service.append(name, value))
