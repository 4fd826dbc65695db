"""CLI command: dyescript build -- compile a source file to CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dyescript.compiler import compile_source
from dyescript.config import CompilerConfig
from dyescript.parser import ParseError


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write CSS here instead of stdout")
@click.option("--minify", is_flag=True, help="Drop redundant semicolons")
@click.option("--strict", is_flag=True, help="Treat unresolved variables and unknown statements as errors")
def build(source: str, output: str | None, minify: bool, strict: bool) -> None:
    """Compile a DyeScript file into a stylesheet.

    Statement errors are reported on stderr; the rest of the file still compiles.
    """
    path = Path(source)
    config = CompilerConfig(minify=minify, strict=strict, source_name=path.name)

    try:
        result = compile_source(path.read_text(encoding="utf-8"), config)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for diag in result.diagnostics:
        click.echo(str(diag), err=True)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result.css)
