# main.py

"""Entry point for the catalog_cart command-line shell."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("catalog_cart.main")


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        msg = f"must be a positive integer, got {raw}"
        raise argparse.ArgumentTypeError(msg)
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="catalog_cart",
        description="Browse the product catalog and build an order cart.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    products = sub.add_parser("products", help="List catalog products.")
    products.add_argument(
        "-s",
        "--search",
        default="",
        help="Case-insensitive text to find in name or description.",
    )
    products.add_argument(
        "-c",
        "--category",
        default=Settings.ALL_CATEGORIES,
        help=f"Exact category name (default: {Settings.ALL_CATEGORIES}).",
    )
    products.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format (default: table).",
    )

    sub.add_parser("categories", help="List catalog categories.")

    add = sub.add_parser("add", help="Add a product to the cart.")
    add.add_argument("product_id", help="Catalog product id, e.g. BT001.")
    add.add_argument(
        "-q",
        "--quantity",
        type=_positive_int,
        default=None,
        help="Quantity to add (default: product minimum order).",
    )

    cart = sub.add_parser("cart", help="Show the current cart.")
    cart.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format (default: table).",
    )
    return parser


def main() -> None:
    """Dispatch the requested subcommand and exit with its code."""
    log_file = setup_logging()
    logger.info("catalog_cart starting, log file: %s", log_file)

    args = _build_parser().parse_args()

    from src.cli import runner

    if args.command == "products":
        exit_code = runner.list_products(
            args.search, args.category, args.output_format,
        )
    elif args.command == "categories":
        exit_code = runner.list_categories()
    elif args.command == "add":
        exit_code = runner.add_product(args.product_id, args.quantity)
    else:
        exit_code = runner.show_cart(args.output_format)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
