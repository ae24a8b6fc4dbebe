"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the variable service and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envperm.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from envperm.config.settings import EnvPermSettings
    from envperm.services.result import ServiceResult
    from envperm.services.variables import VariableService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: EnvPermSettings) -> None:
        self.settings = settings
        self._service: VariableService | None = None

        from envperm.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from envperm.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> VariableService:
        """The variable service (created lazily on first access)."""
        if self._service is None:
            from envperm.services.variables import VariableService

            self._service = VariableService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
