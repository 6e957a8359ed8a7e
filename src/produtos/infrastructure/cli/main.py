import click

from produtos.infrastructure.cli.product_commands import (
    product_add,
    product_count,
    product_list,
    product_remove,
    product_show,
    product_update,
)
from produtos.infrastructure.log import configure_logging
from produtos.infrastructure.settings import load_settings


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override PRODUTOS_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """Produtos: product catalogue"""
    configure_logging(log_level or load_settings().log_level)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_count)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
