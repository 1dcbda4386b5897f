"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__
from objkit.config import ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """objkit - rectangles, JSON round trips and CSS selector building."""
    config = ObjkitConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from objkit.cli.area import area  # noqa: E402
from objkit.cli.codec import json_command  # noqa: E402
from objkit.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(json_command)
cli.add_command(selector)
