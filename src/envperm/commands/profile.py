"""Command: show which profile file envperm writes to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envperm.commands._base import EnvPermCommand

if TYPE_CHECKING:
    from envperm.commands._context import AppContext


@click.command(
    cls=EnvPermCommand,
    examples="""\
  envperm profile
  envperm -q profile
  envperm --home /tmp/sandbox profile""",
)
@click.pass_obj
def profile(app: AppContext) -> None:
    """Show the profile file that writes go to (nothing is created)."""
    app.emit(app.service.profile())
