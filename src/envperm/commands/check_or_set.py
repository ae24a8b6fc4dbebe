"""Command: set a variable only if it is not already in the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envperm.commands._base import EnvPermCommand

if TYPE_CHECKING:
    from envperm.commands._context import AppContext


@click.command(
    "check-or-set",
    cls=EnvPermCommand,
    examples="""\
  envperm check-or-set DUMMY 1
  envperm -q check-or-set JAVA_HOME /usr/lib/jvm/default""",
)
@click.argument("name")
@click.argument("value")
@click.pass_obj
def check_or_set(app: AppContext, name: str, value: str) -> None:
    """Set NAME in the profile unless it is already defined."""
    app.emit(app.service.check_or_set(name, value))
