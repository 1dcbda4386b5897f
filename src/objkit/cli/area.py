"""CLI command: objkit area -- print the area of a rectangle."""

from __future__ import annotations

import click

from objkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{Rectangle(width, height).area():g}")
