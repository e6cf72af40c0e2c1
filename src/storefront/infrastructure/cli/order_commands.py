"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.dto import CartItemSpec, CustomerSpec, OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.lookup_order import LookupOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order import UpdateOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import Container


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1:3,2:5' (product id : quantity) into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        product_id_str, _, qty = pair.partition(":")
        try:
            product_id = int(product_id_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Expected 'ProductId:Quantity'."
            )
        specs.append(CartItemSpec(product_id=product_id, quantity=qty or None))
    return specs


@click.command("create")
@click.option("--items", required=True, help="Cart as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--name", default=None, help="Customer name.")
@click.option("--phone", default=None, help="Customer phone.")
@click.option("--address", default=None, help="Shipping address.")
@click.pass_obj
def order_create(
    container: Container,
    items: str,
    name: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Check out a cart as a new order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=container.order_repository,
        product_repo=container.product_repository,
        shipping_fee=container.shipping_fee,
    )

    try:
        dto = handler.handle(
            specs, CustomerSpec(name=name, phone=phone, address=address)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} created  (id={dto.order_id})")
    click.echo(f"  {'Subtotal':<12} {dto.subtotal:>14}")
    click.echo(f"  {'Shipping':<12} {dto.shipping:>14}")
    click.echo(f"  {'Total':<12} {dto.total:>14}")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (id={dto.id}, status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Customer: {dto.customer_name or '-'}")
    click.echo(f"Phone:    {dto.customer_phone or '-'}")
    click.echo(f"Address:  {dto.customer_address or '-'}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*60}")
    for line in dto.lines:
        label = line.product_name or f"#{line.product_id}"
        click.echo(
            f"  {label:<24} {line.quantity:>5} {line.unit_price:>14} {line.line_total:>14}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Subtotal':<45} {dto.subtotal:>14}")
    click.echo(f"  {'Shipping':<45} {dto.shipping:>14}")
    click.echo(f"  {'Order Total':<45} {dto.total:>14}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=container.order_repository)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("lookup")
@click.argument("order_number")
@click.pass_obj
def order_lookup(container: Container, order_number: str) -> None:
    """Find an order by its order number (e.g. 20250821-0007)."""
    handler = LookupOrderHandler(order_repo=container.order_repository)

    try:
        dto = handler.handle(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus]),
    default=None,
    help="Only orders in this status.",
)
@click.option("--limit", type=int, default=100, show_default=True, help="Maximum rows (1-1000).")
@click.pass_obj
def order_list(container: Container, status: str | None, limit: int) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=container.order_repository)

    try:
        rows = handler.handle(status=status, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order No':<16} {'Created':<20} {'Status':<10} {'Customer':<20} {'Total':>14}")
    click.echo("-" * 84)
    for row in rows:
        click.echo(
            f"{row.order_number:<16} {row.created_at:<20} {row.status:<10} "
            f"{row.customer_name or '-':<20} {row.total:>14}"
        )


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", type=click.Choice([s.value for s in OrderStatus]), default=None)
@click.option("--name", default=None, help="Corrected customer name.")
@click.option("--phone", default=None, help="Corrected customer phone.")
@click.option("--address", default=None, help="Corrected shipping address.")
@click.pass_obj
def order_update(
    container: Container,
    order_id: int,
    status: str | None,
    name: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Change an order's status or correct its customer details."""
    handler = UpdateOrderHandler(order_repo=container.order_repository)

    try:
        dto = handler.handle(
            order_id, status=status, name=name, phone=phone, address=address
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} updated  (status={dto.status})")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.confirmation_option(prompt="Delete this order and all its line items?")
@click.pass_obj
def order_delete(container: Container, order_id: int) -> None:
    """Delete an order together with its line items."""
    handler = DeleteOrderHandler(order_repo=container.order_repository)

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
