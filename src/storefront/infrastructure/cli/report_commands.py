"""CLI commands for the admin dashboard."""

from __future__ import annotations

import click

from storefront.application.show_dashboard import ShowDashboardHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


def _handler(container: Container) -> ShowDashboardHandler:
    return ShowDashboardHandler(
        order_repo=container.order_repository,
        product_repo=container.product_repository,
        report_repo=container.report_repository,
    )


@click.command("summary")
@click.pass_obj
def report_summary(container: Container) -> None:
    """Latest pending orders, 30-day best sellers and newest products."""
    try:
        summary = _handler(container).summary()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Latest pending orders")
    if not summary.latest_pending:
        click.echo("  (none)")
    for o in summary.latest_pending:
        click.echo(f"  {o.order_number:<16} {o.customer_name or '-':<20} {o.total:>14}")

    click.echo()
    click.echo("Top products (30 days)")
    if not summary.top_products:
        click.echo("  (none)")
    for p in summary.top_products:
        click.echo(f"  #{p.product_id:<5} {p.name:<24} {p.quantity:>5} {str(p.revenue):>14}")

    click.echo()
    click.echo("Latest products")
    if not summary.latest_products:
        click.echo("  (none)")
    for p in summary.latest_products:
        click.echo(f"  #{p.id:<5} {p.name:<24} {p.price:>14}")


@click.command("monthly")
@click.pass_obj
def report_monthly(container: Container) -> None:
    """Order count and revenue per month over the last 12 months."""
    try:
        rows = _handler(container).monthly()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No orders in the last 12 months.")
        return

    click.echo(f"{'Month':<8} {'Orders':>7} {'Revenue':>16}")
    click.echo("-" * 33)
    for row in rows:
        click.echo(f"{row.month:<8} {row.orders_count:>7} {str(row.revenue):>16}")
