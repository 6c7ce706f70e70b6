"""CLI command: twinstyle resolve -- print the styles for a class string."""

from __future__ import annotations

import json
import sys

import click

from twinstyle.cli.options import build_context, config_option
from twinstyle.convert import get_styles
from twinstyle.errors import MacroError


@click.command()
@click.argument("classes")
@config_option
@click.option("--indent", default=2, type=int, help="JSON indentation")
def resolve(classes: str, config_path: str | None, indent: int) -> None:
    """Resolve CLASSES (space separated) and print the style object as JSON."""
    context = build_context(config_path)

    try:
        styles = get_styles(classes, context)
    except MacroError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(styles, indent=indent or None))
