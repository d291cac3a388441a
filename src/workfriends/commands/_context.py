"""AppContext — the object every workfriends command receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from workfriends.config.logging import configure_logging
from workfriends.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from workfriends.config.settings import WorkFriendsSettings
    from workfriends.services.result import ServiceResult

# Rejected input exits 1; an input list with nothing left to classify exits 2.
EXIT_CODES = {
    "VALIDATION_FAILED": 1,
    "INVALID_EMAILS": 1,
    "NO_VALID_EMAILS": 2,
}


class AppContext:
    """Resolved settings plus result emission for one invocation."""

    def __init__(self, settings: WorkFriendsSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*: verdicts to stdout, rejections to stderr.

        A rejection ends the process with the exit code for its error code
        (see ``EXIT_CODES``; unknown codes exit 1).
        """
        text = format_result(result, settings=self.output)
        if result.ok:
            click.echo(text)
            return

        click.echo(text, err=True)
        code = result.error.code if result.error else ""
        raise SystemExit(EXIT_CODES.get(code, 1))
