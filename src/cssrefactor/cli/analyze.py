"""CLI command: cssrefactor analyze -- print statistics for a CSS file."""

from __future__ import annotations

import sys

import click

from cssrefactor.analysis import compute_stats, find_patterns
from cssrefactor.config import DEFAULT_CONFIG
from cssrefactor.errors import CSSRefactorError
from cssrefactor.files import read_css
from cssrefactor.parser import parse_css


def _kb(size: int) -> str:
    return f"{size / 1024:.2f} KB"


@click.command()
@click.argument("css_file", default=DEFAULT_CONFIG.analyze_input)
def analyze(css_file: str) -> None:
    """Analyze a CSS file and print statistics to guide refactoring."""
    config = DEFAULT_CONFIG
    try:
        click.echo(f"Analyzing CSS file: {css_file}")
        source = read_css(css_file)
        click.echo(f"File size: {_kb(len(source.encode('utf-8')))}")
        stats = compute_stats(parse_css(source), source)
    except CSSRefactorError as exc:
        click.echo(f"Error analyzing CSS: {exc}", err=True)
        sys.exit(1)

    click.echo("\n=== CSS ANALYSIS SUMMARY ===")
    click.echo(f"Selectors: {stats.selector_total}")
    click.echo(f"Declarations: {stats.declaration_total}")
    click.echo(f"Rule sets: {stats.rule_total}")
    click.echo(f"Media Queries: {stats.media_query_total}")

    click.echo("\n=== SPECIFICITY ===")
    click.echo(f"Max specificity: {stats.max_specificity}")
    click.echo(f"Avg specificity: {stats.average_specificity:.2f}")

    click.echo("\n=== SIZE ANALYSIS ===")
    click.echo(f"Size (gzipped estimate): {_kb(stats.gzip_size_bytes)}")

    click.echo(f"\n=== TOP {config.top_properties} PROPERTIES ===")
    for prop, count in stats.top_properties(config.top_properties):
        click.echo(f"{prop}: {count} times")

    click.echo("\n=== ID SELECTORS ===")
    click.echo(f"Total ID selectors: {len(stats.id_selectors)}")

    click.echo("\n=== POTENTIAL OPTIMIZATION AREAS ===")
    patterns = find_patterns(
        source, top=config.top_patterns, media_threshold=config.duplicate_media_threshold
    )
    click.echo("Common margin patterns:")
    for pattern, count in patterns.margin:
        click.echo(f"  {pattern}: {count} times")
    click.echo("Common padding patterns:")
    for pattern, count in patterns.padding:
        click.echo(f"  {pattern}: {count} times")
    click.echo("\nDuplicated media queries:")
    for query, count in patterns.duplicate_media:
        click.echo(f"  {query}: {count} times")

    click.echo("\nAnalysis complete. For detailed refactoring, run the optimize command.")
