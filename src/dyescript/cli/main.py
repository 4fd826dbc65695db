"""DyeScript CLI entry point: Click group with subcommands."""

import logging

import click

from dyescript import __version__


@click.group()
@click.version_option(version=__version__, prog_name="dyescript")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler activity to stderr")
def cli(verbose: bool) -> None:
    """DyeScript - compile .dye style sources into CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from dyescript.cli.build import build  # noqa: E402
from dyescript.cli.check import check  # noqa: E402
from dyescript.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(inspect)
