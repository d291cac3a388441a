"""Command: decide whether email addresses belong to one organization."""

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
  workfriends check bob@worktionary.com sue@worktionary.com
  workfriends check bob@worktionary.com advisor@worktionary.ai \\
      -d worktionary.com -d worktionary.ai
  workfriends --json check -f attendees.txt
  cat attendees.txt | workfriends -q check -f -""",
)
@click.argument("emails", nargs=-1)
@click.option(
    "-d",
    "--domain",
    "domains",
    multiple=True,
    help="Known organization domain (repeatable). Overrides the config file.",
)
@click.option(
    "-f",
    "--file",
    "source",
    type=click.File("r"),
    default=None,
    help="Read addresses one per line ('-' for stdin).",
)
@click.pass_obj
def check(
    app: AppContext,
    emails: tuple[str, ...],
    domains: tuple[str, ...],
    source: IO[str] | None,
) -> None:
    """Check whether EMAILS are work friends (one organization)."""
    from workfriends.config.logging import bind_invocation
    from workfriends.services.membership import MembershipService

    addresses = collect_emails(emails, source)
    bind_invocation("check", email_count=len(addresses))
    svc = MembershipService(app.settings)
    app.emit(svc.check(addresses, list(domains) if domains else None))
