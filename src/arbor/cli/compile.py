"""CLI command: arbor compile -- render a JSON rule tree as CSS."""

from __future__ import annotations

import sys

import click

from arbor.config import CompilerConfig, OutputStyle
from arbor.compiler import Compiler
from arbor.errors import CompileError, ConfigError, LoadError
from arbor.loader import load_file


@click.command("compile")
@click.argument("rulefile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--compressed/--expanded",
    default=False,
    help="Emit compressed CSS instead of the expanded default.",
)
@click.option("--indent", "indent_width", type=int, default=None, help="Spaces per indentation level.")
def compile_command(rulefile: str, compressed: bool, indent_width: int | None) -> None:
    """Compile RULEFILE (a JSON rule tree) and print the CSS to stdout."""
    style = OutputStyle.COMPRESSED if compressed else OutputStyle.EXPANDED

    try:
        config = CompilerConfig.from_options(output_style=style, indent_width=indent_width)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(2)

    try:
        rules = load_file(rulefile)
    except LoadError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    try:
        output = Compiler(config).compile(*rules)
    except CompileError as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    if output:
        click.echo(output)
