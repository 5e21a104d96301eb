"""responsive-type CLI entry point: Click group with subcommands."""

import click

from responsive_type import __version__


@click.group()
@click.version_option(version=__version__, prog_name="responsive-type")
def cli() -> None:
    """responsive-type - fluid typography for CSS via the responsive keyword."""


# Import and register subcommands
from responsive_type.cli.process import process  # noqa: E402
from responsive_type.cli.inspect import inspect  # noqa: E402

cli.add_command(process)
cli.add_command(inspect)
