"""CLI commands for the VIP discount rule and its checkout banner."""

from __future__ import annotations

import json

import click

from vipdiscount.application.generate_discounts import GenerateDiscountsHandler
from vipdiscount.application.show_savings import ShowSavingsHandler
from vipdiscount.domain.exceptions import DomainException
from vipdiscount.domain.model.value_objects import Money
from vipdiscount.infrastructure.bootstrap import discount_rule, locale_table


@click.command("run")
@click.option(
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default="stdin",
    help="Host input as JSON.",
)
@click.option("--pretty", is_flag=True, default=False, help="Indent the JSON output.")
def discount_run(input_file, pretty: bool) -> None:
    """Run the VIP discount rule on a host input document."""
    try:
        payload = json.loads(input_file.read())
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Input is not valid JSON: {exc}")

    try:
        handler = GenerateDiscountsHandler(rule=discount_rule())
        output = handler.handle(payload)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(output, indent=2 if pretty else None))


@click.command("savings")
@click.option(
    "--total",
    default=None,
    help="Order total after the discount. Omit when unknown.",
)
@click.option("--heading", default=None, help="Override the banner heading.")
@click.option("--description", default=None, help="Override the banner text ('<br />' separates lines).")
def discount_savings(total: str | None, heading: str | None, description: str | None) -> None:
    """Show the checkout banner copy for a VIP order."""
    try:
        handler = ShowSavingsHandler(locale=locale_table())
        dto = handler.handle(
            total=Money.of(total) if total is not None else None,
            heading=heading,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"[{dto.tone}] {dto.heading}")
    for line in dto.lines:
        click.echo(f"  {line}")
