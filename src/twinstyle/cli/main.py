"""twinstyle CLI entry point: Click group with subcommands."""

import logging

import click

from twinstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="twinstyle")
@click.option("--verbose", "-v", is_flag=True, help="Log resolution details")
def cli(verbose: bool) -> None:
    """twinstyle - resolve utility classes into style objects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from twinstyle.cli.resolve import resolve  # noqa: E402
from twinstyle.cli.inspect import plugins, theme  # noqa: E402

cli.add_command(resolve)
cli.add_command(theme)
cli.add_command(plugins)
