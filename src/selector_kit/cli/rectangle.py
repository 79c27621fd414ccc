"""CLI command: selector-kit rectangle -- print a rectangle as JSON."""

from __future__ import annotations

import sys

import click

from selector_kit.objects import Rectangle, to_json


def _number(value: float) -> float | int:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rectangle(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle and its area as JSON."""
    try:
        rect = Rectangle(_number(width), _number(height))
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(to_json({**rect.to_dict(), "area": rect.area()}))
