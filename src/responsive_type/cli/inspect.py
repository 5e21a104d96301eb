"""CLI command: responsive-type inspect -- list responsive declarations."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from responsive_type.errors import StylesheetParseError, TransformError
from responsive_type.events.bus import EventBus
from responsive_type.events.types import DeclarationTransformed, RootSizeChanged
from responsive_type.model.diagnostic import Severity
from responsive_type.processor import transform_root
from responsive_type.stylesheet import parse_stylesheet


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Show how each responsive declaration in a CSS file resolves.

    Lists the selector, property, resolved sizes and widths, and the
    generated expression for every declaration, then a diagnostics summary.
    Nothing is written.
    """
    css_path = Path(cssfile)

    try:
        root = parse_stylesheet(css_path.read_text(encoding="utf-8"))
    except StylesheetParseError as exc:
        click.echo(f"Parse error in {css_path.name}: {exc}", err=True)
        sys.exit(1)

    found: list[DeclarationTransformed] = []
    bus = EventBus()
    bus.subscribe(DeclarationTransformed, found.append)
    bus.subscribe(
        RootSizeChanged,
        lambda e: click.echo(f"Root size: {e.root_size} (from {e.selector})"),
    )

    try:
        context = transform_root(root, event_bus=bus)
    except TransformError as exc:
        click.echo(f"Transform error in {css_path.name}: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Responsive declarations: {len(found)}")
    for event in found:
        p = event.params
        click.echo(f"  {event.selector} {{ {event.prop} }}")
        click.echo(f"    size:  {p.min_size} -> {p.max_size}")
        click.echo(f"    width: {p.min_width} -> {p.max_width}")
        click.echo(f"    value: {event.expression}")

    for diag in context.diagnostics:
        click.echo(str(diag))

    warnings = [d for d in context.diagnostics if d.severity is Severity.WARNING]
    click.echo()
    click.echo(f"Summary: {len(found)} declaration(s), {len(warnings)} warning(s)")
