"""Command line entry point. Uses Click for argument parsing."""

from __future__ import annotations

import logging

import click

from boxdown.config import load_config
from boxdown.document import build_tree
from boxdown.highlight import PygmentsHighlighting
from boxdown.parser import parse_events
from boxdown.render import render


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--columns", "-c", type=click.IntRange(min=1), default=None, help="Column budget (default: 80)")
@click.option("--theme", default=None, help="Pygments style used for code blocks")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Log level (logs go to stderr)",
)
@click.option("--dump-tree", is_flag=True, help="Print the laid-out box tree instead of rendering it")
def main(source, columns, theme, log_level, dump_tree):
    """Render a markdown document with colors and box-drawing borders."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config()
    if columns is not None:
        config.columns = columns
    if theme is not None:
        config.theme = theme

    try:
        highlighting = PygmentsHighlighting(config.theme)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--theme") from e

    events = parse_events(source.read())
    root = build_tree(events, columns=config.columns, highlighting=highlighting)
    if dump_tree:
        click.echo(root.dump())
        return

    click.echo(render(root), nl=False)


if __name__ == "__main__":
    main()
