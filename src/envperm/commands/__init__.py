"""Subcommand modules for envperm.

Provides register_commands() which uses deferred imports to keep
``envperm --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from envperm.commands.append import append
    from envperm.commands.append_to_end import append_to_end
    from envperm.commands.check_or_set import check_or_set
    from envperm.commands.profile import profile
    from envperm.commands.set_cmd import set_cmd

    cli.add_command(set_cmd)
    cli.add_command(check_or_set)
    cli.add_command(append)
    cli.add_command(append_to_end)
    cli.add_command(profile)
