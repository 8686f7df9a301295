"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    default=ObjtasksConfig().log_level,
    help="Logging level for library debug output",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objtasks - rectangles, JSON helpers and CSS selector building."""
    config = ObjtasksConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.rect import area, decode_rect, encode_rect  # noqa: E402
from objtasks.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(encode_rect)
cli.add_command(decode_rect)
cli.add_command(selector)
