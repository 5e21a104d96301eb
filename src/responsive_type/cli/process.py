"""CLI command: responsive-type process -- rewrite a stylesheet."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from responsive_type.config import TransformConfig
from responsive_type.errors import StylesheetParseError, TransformError
from responsive_type.processor import process_css
from responsive_type.units import DEFAULT_ROOT_SIZE


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result here instead of stdout",
)
@click.option(
    "--root-size",
    default=DEFAULT_ROOT_SIZE,
    show_default=True,
    help="Root font size used for px -> rem conversion until an html rule sets one",
)
@click.option(
    "--media-type",
    default="screen",
    show_default=True,
    help="Media type for the boundary @media blocks ('' for none)",
)
@click.option("--indent", default=4, type=int, show_default=True, help="Spaces per nesting level")
@click.option("-v", "--verbose", is_flag=True, help="Log each transformed declaration")
def process(
    cssfile: str,
    output: str | None,
    root_size: str,
    media_type: str,
    indent: int,
    verbose: bool,
) -> None:
    """Rewrite responsive declarations in a CSS file.

    Prints the transformed stylesheet (or writes it to --output) and reports
    warnings on stderr.  Exits with code 1 when the file cannot be parsed or a
    declaration cannot be transformed.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    css_path = Path(cssfile)
    config = TransformConfig(
        default_root_size=root_size, media_type=media_type, indent=indent
    )

    try:
        source = css_path.read_text(encoding="utf-8")
        result = process_css(source, config=config)
    except StylesheetParseError as exc:
        click.echo(f"Parse error in {css_path.name}: {exc}", err=True)
        sys.exit(1)
    except TransformError as exc:
        click.echo(f"Transform error in {css_path.name}: {exc}", err=True)
        sys.exit(1)

    for warning in result.warnings:
        click.echo(str(warning), err=True)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result.css, nl=False)
