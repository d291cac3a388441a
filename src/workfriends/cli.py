"""``workfriends`` console script."""

from __future__ import annotations

import click

from workfriends import __version__
from workfriends.commands._context import AppContext
from workfriends.commands.check import check
from workfriends.commands.validate import validate
from workfriends.config.settings import WorkFriendsSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="workfriends")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only yes/no (or a one-line error).")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and result metadata.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Read this workfriends.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """workfriends — do these email addresses belong to one organization?

    Flags left off fall through to WORKFRIENDS_* variables and the config file.
    """
    ctx.obj = AppContext(WorkFriendsSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
cli.add_command(validate)
