"""selectorkit CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig
from selectorkit.errors import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """selectorkit - build CSS selectors and convert plain objects to JSON."""
    try:
        config = SelectorKitConfig.from_env()
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.rectangle import rectangle, revive  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
cli.add_command(revive)
