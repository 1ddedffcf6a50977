"""CLI command: cssrefactor optimize -- minify a CSS file."""

from __future__ import annotations

import sys

import click

from cssrefactor.config import DEFAULT_CONFIG
from cssrefactor.errors import CSSRefactorError
from cssrefactor.files import read_css, write_text
from cssrefactor.optimize import minify


@click.command()
@click.argument("css_file", default=DEFAULT_CONFIG.optimize_input)
@click.argument("output_file", default=DEFAULT_CONFIG.optimize_output)
@click.option(
    "--keep-bang-comments", is_flag=True, help="Preserve /*! ... */ license comments"
)
def optimize(css_file: str, output_file: str, keep_bang_comments: bool) -> None:
    """Minify CSS_FILE and write the result to OUTPUT_FILE."""
    try:
        click.echo(f"Optimizing CSS file: {css_file}")
        source = read_css(css_file)
        click.echo(f"Original file size: {len(source.encode('utf-8')) / 1024:.2f} KB")

        result = minify(source, keep_bang_comments=keep_bang_comments)
        click.echo("Basic optimization results:")
        click.echo(f"  Original size: {result.original_size / 1024:.2f} KB")
        click.echo(f"  Optimized size: {result.minified_size / 1024:.2f} KB")
        click.echo(f"  Efficiency: {result.efficiency * 100:.2f}%")

        output = write_text(output_file, result.styles)
    except CSSRefactorError as exc:
        click.echo(f"Error optimizing CSS: {exc}", err=True)
        sys.exit(1)

    click.echo(f"\nOptimized CSS saved to {output}")
    click.echo("\nNext steps:")
    click.echo("1. Convert to SCSS using the convert command")
    click.echo("2. Review the output and make manual improvements")
    click.echo("3. Implement the suggested architecture in your project")
