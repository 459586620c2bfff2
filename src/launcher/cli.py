# cli.py
import asyncio
import logging
import sys

import click

from launcher.config.settings import get_settings
from launcher.errors import LauncherError
from launcher.processes import select_process, start_process

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.command()
@click.argument("role", required=False)
@click.option("--log-level",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              default=None,
              help="Override the LOG_LEVEL setting")
def cli(role, log_level):
    """Start the files API (`api`) or a queue worker (`worker`)."""
    try:
        # Reject unknown roles before settings load
        select_process(role)
        configure_logging((log_level or get_settings().log_level).upper())
        asyncio.run(start_process(role))
    except LauncherError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    cli()
