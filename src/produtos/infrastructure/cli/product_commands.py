"""CLI commands for the Product catalogue."""

from __future__ import annotations

import click

from produtos.application.add_product import AddProductHandler
from produtos.application.list_products import ListProductsHandler
from produtos.application.remove_product import RemoveProductHandler
from produtos.application.show_product import ShowProductHandler
from produtos.application.update_product import UpdateProductHandler
from produtos.domain.exceptions import DomainException
from produtos.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default="", help="Free-text description.")
def product_add(name: str, price: str, description: str) -> None:
    """Add a new product to the catalogue."""
    try:
        handler = AddProductHandler(product_repo=product_repository())
        product = handler.handle(name=name, price=price, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    try:
        handler = ShowProductHandler(product_repo=product_repository())
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"ID:          {dto.id}")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Price:       {dto.price}")
    click.echo(f"Description: {dto.description or '-'}")


@click.command("list")
@click.option("--page", default=0, show_default=True, type=int, help="Zero-based page number.")
@click.option("--size", default=20, show_default=True, type=int, help="Products per page.")
@click.option(
    "--sort",
    "sort",
    multiple=True,
    help="Sort expression 'property[,asc|desc]'; repeat for tie-breakers.",
)
def product_list(page: int, size: int, sort: tuple[str, ...]) -> None:
    """List products in the catalogue, one page at a time."""
    try:
        handler = ListProductsHandler(product_repo=product_repository())
        result = handler.handle(page=page, size=size, sort=sort)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10}")
    click.echo("-" * 68)
    for p in result.items:
        click.echo(f"{p.id:<36} {p.name:<20} {p.price:>10}")
    click.echo(
        f"Page {result.page + 1} of {result.total_pages} "
        f"({result.total_items} products)"
    )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--description", default=None, help="New description.")
def product_update(
    product_id: str,
    name: str | None,
    price: str | None,
    description: str | None,
) -> None:
    """Update a product's name, price or description."""
    if name is None and price is None and description is None:
        raise click.UsageError("Nothing to update: pass --name, --price or --description")

    try:
        handler = UpdateProductHandler(product_repo=product_repository())
        dto = handler.handle(
            product_id=product_id, name=name, description=description, price=price
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated: '{dto.name}' at {dto.price}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalogue."""
    try:
        handler = RemoveProductHandler(product_repo=product_repository())
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} removed")


@click.command("count")
def product_count() -> None:
    """Print the number of products in the catalogue."""
    try:
        total = product_repository().count()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(total))
