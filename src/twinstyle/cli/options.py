"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from twinstyle.config import ConfigContext, find_config, load_config
from twinstyle.errors import MacroError

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON config file (defaults to ./tailwind.json when present)",
)


def build_context(config_path: str | None) -> ConfigContext:
    """Create a context resolved against *config_path* (or the default file)."""
    path = Path(config_path) if config_path else find_config()
    context = ConfigContext()
    try:
        context.resolve(load_config(path) if path else None)
    except MacroError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    return context
