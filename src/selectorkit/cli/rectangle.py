"""CLI commands: selectorkit rectangle / revive -- JSON round trips for Rectangle."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import DeserializationError
from selectorkit.jsonbridge import from_json, get_json
from selectorkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(config, width: float, height: float) -> None:
    """Print a rectangle as JSON followed by its area."""
    rect = Rectangle(_plain(width), _plain(height))
    click.echo(get_json(rect, config))
    click.echo(f"Area: {_plain(rect.get_area())}")


@click.command()
@click.argument("text")
def revive(text: str) -> None:
    """Rebuild a rectangle from JSON TEXT and print its area."""
    try:
        rect = from_json(Rectangle, text)
        area = _plain(rect.get_area())
    except DeserializationError as exc:
        click.echo(f"Deserialization error: {exc}", err=True)
        sys.exit(1)
    except (AttributeError, TypeError, ValueError) as exc:
        click.echo(f"Not a rectangle: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Area: {area}")


def _plain(number: float) -> float | int:
    """Drop the fractional part of whole numbers for display."""
    return int(number) if float(number).is_integer() else number
