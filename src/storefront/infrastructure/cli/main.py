import logging

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_lookup,
    order_show,
    order_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.report_commands import report_monthly, report_summary
from storefront.infrastructure.cli.settings_commands import settings_show, settings_update
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.persistence.migrations import apply_migrations


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: catalog, checkout and order back-office"""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = build_container(settings)
    ctx.call_on_close(container.database.dispose)
    ctx.obj = container


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def report() -> None:
    """Dashboard reports."""


@cli.group("settings")
def store_settings() -> None:
    """Site title and footer content."""


@cli.group()
def db() -> None:
    """Database schema."""


@db.command("migrate")
@click.pass_obj
def db_migrate(container: Container) -> None:
    """Apply pending schema migrations."""
    try:
        applied = apply_migrations(container.database)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if applied:
        click.echo("Applied migrations: " + ", ".join(str(v) for v in applied))
    else:
        click.echo("Schema is up to date.")


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_lookup)
order.add_command(order_show)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
report.add_command(report_monthly)
report.add_command(report_summary)
store_settings.add_command(settings_show)
store_settings.add_command(settings_update)
