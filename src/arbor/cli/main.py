"""Arbor CLI entry point: Click group with subcommands."""

import logging

import click

from arbor import __version__


@click.group()
@click.version_option(version=__version__, prog_name="arbor")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler activity to stderr.")
def cli(verbose: bool) -> None:
    """Arbor - compile nested rule trees into CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from arbor.cli.compile import compile_command  # noqa: E402

cli.add_command(compile_command)
