"""CLI command: dyescript inspect -- display what a source file defines."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dyescript.compiler import interpret
from dyescript.config import CompilerConfig
from dyescript.parser import ParseError, parse_source


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def inspect(source: str) -> None:
    """Interpret a DyeScript file and display the resulting store.

    Shows collections (with variables), selectors, animations, motions,
    fonts and the runtime modes the file switched on.
    """
    path = Path(source)

    try:
        statements = parse_source(path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    store, runtime = interpret(statements, CompilerConfig(source_name=path.name))

    click.echo(f"File:       {path.name}")
    click.echo(f"Statements: {len(statements)}")
    click.echo(f"Strict:     {runtime.strict}")
    click.echo(f"Dyegest:    {runtime.dyegest}")
    click.echo()

    click.echo("Collections:")
    for collection in store.scope_manager.collections.values():
        click.echo(f"  {collection.name}  type={collection.type_name}")
        for name, value in collection.variables.items():
            click.echo(f"    &{name} = {value}")
        for name, value in collection.defaults.items():
            if name not in collection.variables:
                click.echo(f"    &{name} = {value}  (default)")
    click.echo()

    if store.is_empty():
        click.echo("Nothing to render.")
    else:
        click.echo("Selectors:")
        for selector, style in store.styles.items():
            click.echo(f"  {selector}  ({len(style)} properties)")

    for title, animations in (("Animations", store.animations), ("Motions", store.motions)):
        if animations:
            click.echo()
            click.echo(f"{title}:")
            for name, frames in animations.items():
                click.echo(f"  {name}  [{', '.join(frames)}]")

    if store.fonts:
        click.echo()
        click.echo("Fonts:")
        for family, font in store.fonts.items():
            click.echo(f"  {family}  src={font.source or '-'}")

    if runtime.logger.diagnostics:
        click.echo()
        click.echo(f"Diagnostics: {len(runtime.logger.diagnostics)} (run 'dyescript check' for details)")
