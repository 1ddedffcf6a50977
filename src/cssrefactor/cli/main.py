"""cssrefactor CLI entry point: Click group with subcommands."""

import logging

import click

from cssrefactor import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssrefactor")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssrefactor - analyze, minify, and scaffold SCSS from CSS files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from cssrefactor.cli.analyze import analyze  # noqa: E402
from cssrefactor.cli.convert import convert  # noqa: E402
from cssrefactor.cli.optimize import optimize  # noqa: E402

cli.add_command(analyze)
cli.add_command(optimize)
cli.add_command(convert)
