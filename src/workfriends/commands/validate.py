"""Command: report structural validity of email addresses."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from workfriends.commands._base import WfCommand
from workfriends.commands._inputs import collect_emails

if TYPE_CHECKING:
    from workfriends.commands._context import AppContext


@click.command(
    cls=WfCommand,
    examples="""\
  workfriends validate user.name@domain.co.uk
  workfriends --json validate -f addresses.txt""",
)
@click.argument("emails", nargs=-1)
@click.option(
    "-f",
    "--file",
    "source",
    type=click.File("r"),
    default=None,
    help="Read addresses one per line ('-' for stdin).",
)
@click.pass_obj
def validate(app: AppContext, emails: tuple[str, ...], source: IO[str] | None) -> None:
    """Validate the format of EMAILS."""
    from workfriends.config.logging import bind_invocation
    from workfriends.services.membership import MembershipService

    addresses = collect_emails(emails, source)
    bind_invocation("validate", email_count=len(addresses))
    app.emit(MembershipService(app.settings).validate(addresses))
