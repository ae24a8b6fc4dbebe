"""Root CLI group for envperm with global flags and command registration."""

from __future__ import annotations

import click

from envperm import __version__
from envperm.commands import register_commands
from envperm.commands._base import EnvPermGroup
from envperm.commands._context import AppContext
from envperm.config.settings import EnvPermSettings


@click.group(
    cls=EnvPermGroup,
    invoke_without_command=True,
    examples="""\
  envperm check-or-set DUMMY 1
  envperm append PATH '$HOME/some/cool/bin'
  envperm append-to-end PATH '$HOME/some/cooler/bin'
  envperm set DUMMY '"/something"'""",
)
@click.version_option(version=__version__, prog_name="envperm")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Directory holding the profile files (default: your home directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    home: str | None,
) -> None:
    """envperm — permanently set environment variables in your shell profile."""
    ctx.ensure_object(dict)
    # Flags only override env/config when actually passed.
    settings = EnvPermSettings.load(
        config_path=config_path,
        home=home,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)