# src/cli/runner.py

"""Headless CLI commands for browsing the catalog and managing the cart."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.errors import InvalidInputError
from src.filters.product_filter import ProductFilter
from src.models.cart import Cart
from src.models.product import Product
from src.services.cart_aggregator import CartAggregator, notification_message
from src.services.pricing import discount_percent, star_count
from src.storage.cart_codec import line_to_record, product_to_record
from src.storage.catalog import Catalog
from src.storage.kv_store import JsonFileStore, KeyValueStore

logger = logging.getLogger("catalog_cart.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def load_catalog() -> Catalog:
    """Load the configured catalog file, or the built-in catalog."""
    if Settings.CATALOG_PATH is None:
        return Catalog.default()
    return Catalog.from_file(Settings.CATALOG_PATH)


def _open_catalog() -> Catalog | None:
    """Load the catalog, reporting a broken catalog file on stderr."""
    try:
        return load_catalog()
    except (
        OSError, KeyError, TypeError, ValueError, OverflowError, RecursionError,
    ) as exc:
        logger.error(
            "Catalog load failed from %s: %s",
            Settings.CATALOG_PATH,
            exc,
            exc_info=True,
        )
        _err.print(f"[red]Cannot load catalog: {exc}[/red]")
        return None


def _discount_label(product: Product) -> str:
    try:
        return f"{discount_percent(product.price, product.mrp)}% OFF"
    except InvalidInputError:
        return "—"


def _stars(rating: float) -> str:
    filled = star_count(rating)
    return "★" * filled + "☆" * (Settings.MAX_STARS - filled)


def _print_products(products: list[Product]) -> None:
    """Render a Rich table of catalog products to stdout."""
    table = Table(
        title="Product Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim")
    table.add_column("Name", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("MRP", justify="right", style="dim")
    table.add_column("Discount", justify="center")
    table.add_column("Rating", justify="center")
    table.add_column("Min order", justify="right")
    table.add_column("Schemes", overflow="fold")

    for p in products:
        name = p.name if p.in_stock else f"{p.name} [red](Out of Stock)[/red]"
        table.add_row(
            p.id,
            name,
            p.category,
            f"₹{p.price:,.2f}",
            f"₹{p.mrp:,.2f}",
            _discount_label(p),
            f"{_stars(p.rating)} ({p.rating})",
            f"{p.min_order_qty} {p.unit}",
            "\n".join(p.schemes),
        )

    Console().print(table)


def _print_cart(cart: Cart) -> None:
    """Render a Rich table of cart lines to stdout."""
    table = Table(
        title="Cart",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", style="dim")
    table.add_column("Name", max_width=40)
    table.add_column("Quantity", justify="right", style="green")
    table.add_column("Price", justify="right")

    for idx, line in enumerate(cart, 1):
        table.add_row(
            str(idx),
            line.id,
            line.name,
            f"{line.quantity} {line.unit}",
            f"₹{line.price:,.2f}",
        )

    Console().print(table)


def _dump_json(data: object) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def list_products(
    search_term: str,
    category: str,
    output_format: str,
) -> int:
    """Print the filtered catalog. Returns an exit code."""
    catalog = _open_catalog()
    if catalog is None:
        return 1
    products = ProductFilter.filter_products(
        catalog.products, search_term, category,
    )
    _err.print(f"[bold]{len(products)} Products[/bold]")

    if not products:
        _err.print(
            "[yellow]No products found. Try adjusting your search "
            "or filter criteria.[/yellow]"
        )
        return 0

    if output_format == "table":
        _print_products(products)
    else:
        _dump_json([product_to_record(p) for p in products])
    return 0


def list_categories() -> int:
    """Print the category universe of the current catalog."""
    catalog = _open_catalog()
    if catalog is None:
        return 1
    for category in ProductFilter.categories(catalog.products):
        sys.stdout.write(f"{category}\n")
    return 0


def _print_notice(name: str, quantity: int, unit: str) -> None:
    title, body = notification_message(name, quantity, unit)
    _err.print(f"[green]✓ {title}:[/green] {body}")


def add_product(
    product_id: str,
    quantity: int | None,
    store: KeyValueStore | None = None,
) -> int:
    """Add a catalog product to the persisted cart."""
    catalog = _open_catalog()
    if catalog is None:
        return 1
    product = catalog.get(product_id)
    if product is None:
        _err.print(f"[red]Unknown product id: {product_id}[/red]")
        return 1

    aggregator = CartAggregator(
        store if store is not None else JsonFileStore(),
        notifier=_print_notice,
    )
    aggregator.hydrate()
    try:
        aggregator.add(product, quantity)
    except InvalidInputError as exc:
        logger.warning("Add to cart rejected: %s", exc)
        _err.print(f"[red]{exc}[/red]")
        return 1

    _err.print(f"[dim]{aggregator.total_items()} Items in Cart[/dim]")
    return 0


def show_cart(
    output_format: str,
    store: KeyValueStore | None = None,
) -> int:
    """Print the persisted cart and its total item count."""
    aggregator = CartAggregator(
        store if store is not None else JsonFileStore()
    )
    cart = aggregator.hydrate()

    if cart.is_empty:
        _err.print("[yellow]Cart is empty.[/yellow]")
    elif output_format == "table":
        _print_cart(cart)
    else:
        _dump_json([line_to_record(line) for line in cart])

    _err.print(f"[bold]{aggregator.total_items()} Items in Cart[/bold]")
    return 0
