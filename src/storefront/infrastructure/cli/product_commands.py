"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 250 or 2.50).")
@click.option("--category", required=True, help="Category label.")
@click.option("--image", default=None, help="Image URL or path.")
@click.option("--id", "product_id", type=int, default=None, help="Explicit product ID.")
@click.pass_obj
def product_add(
    container: Container,
    name: str,
    price: str,
    category: str,
    image: str | None,
    product_id: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=container.product_repository)

    try:
        product = handler.handle(
            name=name, price=price, category=category, image=image, product_id=product_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only this category ('all' for every one).")
@click.option("--search", "query", default=None, help="Case-insensitive name search.")
@click.pass_obj
def product_list(container: Container, category: str | None, query: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=container.product_repository)

    try:
        products = handler.handle(category=category, query=query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<14} {'Price':>14}")
    click.echo("-" * 61)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.category:<14} {p.price:>14}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 4.99).")
@click.option("--category", default=None, help="New category.")
@click.option("--image", default=None, help="New image URL or path.")
@click.pass_obj
def product_update(
    container: Container,
    product_id: int,
    name: str | None,
    price: str | None,
    category: str | None,
    image: str | None,
) -> None:
    """Edit a product (existing orders keep their prices)."""
    handler = UpdateProductHandler(product_repo=container.product_repository)

    try:
        product = handler.handle(
            product_id=product_id, name=name, price=price, category=category, image=image
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' now {product.price}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(container: Container, product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=container.product_repository)

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}: {product.name}")
    click.echo(f"  Category: {product.category}")
    click.echo(f"  Price:    {product.price}")
    click.echo(f"  Image:    {product.image or '-'}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to delete.")
@click.confirmation_option(prompt="Remove this product from the catalog?")
@click.pass_obj
def product_delete(container: Container, product_id: int) -> None:
    """Delete a product that no order refers to."""
    handler = DeleteProductHandler(
        product_repo=container.product_repository,
        order_repo=container.order_repository,
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
