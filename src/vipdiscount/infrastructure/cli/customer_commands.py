"""CLI commands for customer lookups."""

from __future__ import annotations

import json

import click

from vipdiscount.application.check_vip import CheckVipHandler
from vipdiscount.domain.exceptions import DomainException
from vipdiscount.infrastructure.bootstrap import customer_repository


@click.command("check-vip")
@click.option("--customer-id", required=True, help="Customer ID to look up.")
def customer_check_vip(customer_id: str) -> None:
    """Report whether a customer carries the VIP tag."""
    try:
        handler = CheckVipHandler(customer_repo=customer_repository())
        dto = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(dto.to_json()))
