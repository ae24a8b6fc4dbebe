"""Command: set a variable unconditionally (named set_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envperm.commands._base import EnvPermCommand

if TYPE_CHECKING:
    from envperm.commands._context import AppContext


@click.command(
    "set",
    cls=EnvPermCommand,
    examples="""\
  envperm set DUMMY 1
  envperm set DUMMY '"/something"'
  envperm --json set EDITOR vim""",
)
@click.argument("name")
@click.argument("value")
@click.pass_obj
def set_cmd(app: AppContext, name: str, value: str) -> None:
    """Append `export NAME=VALUE` to the profile, even if NAME is already set."""
    app.emit(app.service.set(name, value))
