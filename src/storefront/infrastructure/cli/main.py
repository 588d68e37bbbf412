import click

from storefront.infrastructure.cli.data_commands import data_check, data_repair
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.cli.serve_command import serve
from storefront.infrastructure.observability import (
    install_exception_hooks,
    setup_logging,
)
from storefront.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """Storefront — products and orders over a single JSON document"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    install_exception_hooks()


@cli.group()
def product() -> None:
    """Inspect products."""


@cli.group()
def order() -> None:
    """Inspect and update orders."""


@cli.group()
def data() -> None:
    """Check or repair the data file."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_list)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
data.add_command(data_check)
data.add_command(data_repair)
