"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the validation service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cakecollate.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cakecollate.config.settings import CakeSettings
    from cakecollate.services.result import ServiceResult
    from cakecollate.services.validate import ValidateService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CakeSettings) -> None:
        self.settings = settings
        self._service: ValidateService | None = None

        from cakecollate.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ValidateService:
        """The validation service (created lazily on first access)."""
        if self._service is None:
            from cakecollate.services.validate import ValidateService

            self._service = ValidateService(self.settings.validator_config)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
