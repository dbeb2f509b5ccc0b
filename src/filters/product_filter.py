# src/filters/product_filter.py

"""Catalog filtering by free-text search and category."""

import logging

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("catalog_cart.filters")


class ProductFilter:
    """Derive the visible subset of a catalog.

    Case folding uses ``str.lower()``, which is locale-naive: it does not
    apply full Unicode case folding (e.g. German sharp s).
    """

    @staticmethod
    def matches_search(product: Product, search_term: str) -> bool:
        """True when the term is empty or occurs in name or description."""
        if not search_term:
            return True
        needle = search_term.lower()
        return (
            needle in product.name.lower()
            or needle in product.description.lower()
        )

    @staticmethod
    def matches_category(product: Product, category: str) -> bool:
        """True for the ``All`` sentinel or an exact category match."""
        return (
            category == Settings.ALL_CATEGORIES
            or product.category == category
        )

    @staticmethod
    def filter_products(
        products: list[Product],
        search_term: str = "",
        category: str = Settings.ALL_CATEGORIES,
    ) -> list[Product]:
        """Return products matching both filters, in input order."""
        kept = [
            p
            for p in products
            if ProductFilter.matches_search(p, search_term)
            and ProductFilter.matches_category(p, category)
        ]
        logger.debug(
            "Filter search=%r category=%r kept %d of %d products",
            search_term,
            category,
            len(kept),
            len(products),
        )
        return kept

    @staticmethod
    def categories(products: list[Product]) -> list[str]:
        """``All`` followed by distinct categories in first-seen order."""
        seen: dict[str, None] = {}
        for product in products:
            seen.setdefault(product.category, None)
        return [Settings.ALL_CATEGORIES, *seen]
