import click

from bookstore.infrastructure.cli.catalog_commands import demo, sample
from bookstore.infrastructure.config import (
    DEFAULT_STORE_NAME,
    LOG_LEVELS,
    Settings,
    configure_logging,
)


@click.group()
@click.option(
    "--store-name",
    envvar="BOOKSTORE_NAME",
    default=DEFAULT_STORE_NAME,
    help="Prefix for log output.",
)
@click.option(
    "--log-level",
    envvar="BOOKSTORE_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    help="Logging threshold.",
)
def cli(store_name: str, log_level: str) -> None:
    """Bookstore — catalog and purchase demo"""
    configure_logging(Settings(store_name=store_name, log_level=log_level.upper()))


# Register subcommands
cli.add_command(demo)
cli.add_command(sample)
