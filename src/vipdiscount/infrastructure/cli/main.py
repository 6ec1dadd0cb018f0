import logging

import click

from vipdiscount.infrastructure.cli.customer_commands import customer_check_vip
from vipdiscount.infrastructure.cli.discount_commands import (
    discount_run,
    discount_savings,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """VIP Discount: order discount rule for tagged customers"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(discount_run)
cli.add_command(discount_savings)
cli.add_command(customer_check_vip)
