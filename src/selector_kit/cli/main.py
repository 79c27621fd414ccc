"""selector-kit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selector_kit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selector-kit")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """selector-kit - build CSS selectors and small JSON values."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from selector_kit.cli.build import build  # noqa: E402
from selector_kit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
