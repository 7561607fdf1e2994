"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__
from objkit.config import ObjkitConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=ObjkitConfig().log_level,
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objkit - build CSS selectors and simple value objects."""
    config = ObjkitConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from objkit.cli.rectangle import rectangle  # noqa: E402
from objkit.cli.selector import selector  # noqa: E402

cli.add_command(selector)
cli.add_command(rectangle)
