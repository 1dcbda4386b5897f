"""CLI command: objkit json -- decode a JSON object and re-encode it."""

from __future__ import annotations

import dataclasses
import sys

import click

from objkit.config import ObjkitConfig
from objkit.jsonbridge import ParseError, decode, encode


@click.command("json")
@click.argument("text")
@click.option("--sort-keys", is_flag=True, help="Sort object keys in the output")
@click.option("--indent", type=int, default=None, help="Indent nested values")
@click.pass_obj
def json_command(
    config: ObjkitConfig | None, text: str, sort_keys: bool, indent: int | None
) -> None:
    """Parse a JSON object from TEXT and print it re-encoded.

    Exits with code 1 if TEXT is not a valid JSON object.
    """
    base = config.bridge if config else ObjkitConfig().bridge
    bridge = dataclasses.replace(base, sort_keys=sort_keys, indent=indent)

    try:
        record = decode(dict, text)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error: {exc}{location}", err=True)
        sys.exit(1)

    click.echo(encode(record, bridge))
