"""CLI command: cssrefactor convert -- scaffold SCSS files from a CSS file."""

from __future__ import annotations

import sys

import click

from cssrefactor.config import DEFAULT_CONFIG
from cssrefactor.errors import CSSRefactorError
from cssrefactor.extraction import extract, render
from cssrefactor.files import read_css
from cssrefactor.parser import parse_css
from cssrefactor.scaffold import write_scaffold


@click.command()
@click.argument("css_file", default=DEFAULT_CONFIG.convert_input)
@click.argument("output_dir", default=DEFAULT_CONFIG.scss_output)
def convert(css_file: str, output_dir: str) -> None:
    """Convert CSS_FILE into an SCSS scaffold under OUTPUT_DIR.

    Colors, spacing values, and media-query breakpoints are extracted into
    base/_variables.scss; mixins, main.scss, and sample components are
    written from fixed templates.
    """
    config = DEFAULT_CONFIG
    try:
        click.echo(f"Converting CSS file to SCSS: {css_file}")
        source = read_css(css_file)
        values = extract(parse_css(source))
        written = write_scaffold(
            render(values, palette=config.palette),
            output_dir,
            directories=config.scss_directories,
        )
    except CSSRefactorError as exc:
        click.echo(f"Error converting to SCSS: {exc}", err=True)
        sys.exit(1)

    click.echo(
        f"Extracted {len(values.colors)} color(s), {len(values.spacing)} spacing "
        f"value(s), {len(values.breakpoints)} breakpoint(s)"
    )
    click.echo(f"\nSCSS structure created in {output_dir}/ ({len(written)} files)")
    click.echo("Next steps:")
    click.echo("1. Review the extracted variables and mixins")
    click.echo("2. Organize your CSS rules into the appropriate folders")
    click.echo("3. Use the variables and mixins to replace hardcoded values")
