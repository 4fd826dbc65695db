"""CLI command: dyescript check -- compile a source file and report diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dyescript.compiler import compile_source
from dyescript.config import CompilerConfig
from dyescript.parser import ParseError


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Treat unresolved variables and unknown statements as errors")
def check(source: str, strict: bool) -> None:
    """Compile a DyeScript file and report problems without writing CSS.

    Exits with code 1 when any statement was dropped; warnings alone pass.
    """
    path = Path(source)

    try:
        result = compile_source(
            path.read_text(encoding="utf-8"),
            CompilerConfig(strict=strict, source_name=path.name),
        )
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    log = result.runtime.logger
    if not (log.errors or log.warnings):
        click.echo(f"OK: {path.name} compiles cleanly ({len(result.css)} bytes of CSS)")
        return

    for diag in result.diagnostics:
        click.echo(str(diag))
    click.echo()
    click.echo(f"{path.name}: {len(log.errors)} error(s), {len(log.warnings)} warning(s)")

    if not result.ok:
        sys.exit(1)
