# src/storage/catalog.py

"""Read-only catalog store, populated once at startup."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

from src.errors import InvalidInputError
from src.models.product import Product
from src.storage.cart_codec import product_from_record

logger = logging.getLogger("catalog_cart.storage")

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="BT001",
        name="Birlanu Premium Tea 500g",
        category="Tea",
        price=200.0,
        mrp=250.0,
        image="/api/placeholder/300/200",
        rating=4.5,
        in_stock=True,
        description="Premium quality tea leaves with rich aroma and taste",
        schemes=("Buy 10 Get 1 Free", "5% Festival Discount"),
        min_order_qty=12,
        unit="boxes",
    ),
    Product(
        id="BC001",
        name="Birlanu Instant Coffee 200g",
        category="Coffee",
        price=180.0,
        mrp=220.0,
        image="/api/placeholder/300/200",
        rating=4.3,
        in_stock=True,
        description="Rich and aromatic instant coffee for perfect morning brew",
        schemes=("Bulk Order 15% Off", "Free Samples"),
        min_order_qty=24,
        unit="jars",
    ),
    Product(
        id="BM001",
        name="Birlanu Masala Chai 250g",
        category="Tea",
        price=160.0,
        mrp=200.0,
        image="/api/placeholder/300/200",
        rating=4.7,
        in_stock=True,
        description="Traditional Indian masala chai with authentic spice blend",
        schemes=("Festive Combo Offer", "12+2 Free"),
        min_order_qty=15,
        unit="packets",
    ),
    Product(
        id="BG001",
        name="Birlanu Green Tea 100g",
        category="Tea",
        price=120.0,
        mrp=150.0,
        image="/api/placeholder/300/200",
        rating=4.2,
        in_stock=True,
        description="Healthy green tea with antioxidants for wellness",
        schemes=("Health Pack Discount", "Buy 5 Get 20% Off"),
        min_order_qty=20,
        unit="boxes",
    ),
    Product(
        id="BS001",
        name="Birlanu Special Blend 300g",
        category="Coffee",
        price=220.0,
        mrp=280.0,
        image="/api/placeholder/300/200",
        rating=4.6,
        in_stock=True,
        description="Special coffee blend for connoisseurs",
        schemes=("Premium Member 10% Off", "Early Bird Discount"),
        min_order_qty=18,
        unit="packs",
    ),
    Product(
        id="BH001",
        name="Birlanu Herbal Tea 150g",
        category="Tea",
        price=140.0,
        mrp=180.0,
        image="/api/placeholder/300/200",
        rating=4.4,
        in_stock=False,
        description="Natural herbal tea for health and wellness",
        schemes=("Wellness Package", "Coming Soon Offer"),
        min_order_qty=12,
        unit="boxes",
    ),
)


class Catalog:
    """Immutable, ordered set of products keyed by id."""

    def __init__(self, products: tuple[Product, ...] | list[Product]) -> None:
        by_id: dict[str, Product] = {}
        for product in products:
            if product.id in by_id:
                msg = f"Duplicate product id in catalog: '{product.id}'"
                raise InvalidInputError(msg)
            by_id[product.id] = product
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id = by_id
        logger.debug("Catalog loaded with %d products", len(self._products))

    @classmethod
    def default(cls) -> "Catalog":
        """The built-in Birlanu catalog."""
        return cls(DEFAULT_PRODUCTS)

    @classmethod
    def from_file(cls, path: Path) -> "Catalog":
        """Load a catalog from a JSON array of camelCase product records.

        Errors propagate: an unreadable catalog is a startup failure.
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            msg = f"Catalog file {path} must hold a JSON array"
            raise InvalidInputError(msg)
        products = [product_from_record(record) for record in data]
        logger.info("Loaded %d products from %s", len(products), path)
        return cls(products)

    @property
    def products(self) -> list[Product]:
        """A fresh list of all products in catalog order."""
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        """Look up a product by id."""
        return self._by_id.get(product_id)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)
