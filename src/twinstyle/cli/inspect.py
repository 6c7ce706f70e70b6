"""CLI commands: twinstyle theme / twinstyle plugins -- inspect the resolved config."""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping

import click

from twinstyle.cli.options import build_context, config_option
from twinstyle.config.merge import thaw
from twinstyle.errors import MacroError


@click.command()
@click.argument("path")
@config_option
def theme(path: str, config_path: str | None) -> None:
    """Print the resolved theme value at PATH (e.g. ``colors.red``)."""
    context = build_context(config_path)

    node: object = context.resolve()["theme"]
    for part in path.split("."):
        if not isinstance(node, Mapping) or part not in node:
            click.echo(f"theme.{path} is not defined", err=True)
            sys.exit(1)
        node = node[part]

    click.echo(json.dumps(thaw(node), indent=2))


@click.command()
@config_option
def plugins(config_path: str | None) -> None:
    """List utility classes contributed by plugins."""
    context = build_context(config_path)

    try:
        index = context.plugin_index()
    except MacroError as exc:
        click.echo(f"Plugin error: {exc}", err=True)
        sys.exit(1)

    names = index.class_names()
    if not names:
        click.echo("No plugin utilities")
        return

    click.echo(f"Plugin utilities ({len(names)}):")
    for name in names:
        styles = index.lookup(name) or {}
        parts = [f"  .{name}"]
        parts.extend(
            f"{prop}: {value}" for prop, value in styles.items() if not isinstance(value, Mapping)
        )
        click.echo("  ".join(parts))
        for modifier, declarations in styles.items():
            if isinstance(declarations, Mapping):
                rendered = "; ".join(f"{prop}: {value}" for prop, value in declarations.items())
                click.echo(f"    {modifier}  {rendered}")
