# tests/helpers.py

"""Product builders shared across test modules."""

from src.models.product import Product


def make_product(
    product_id: str = "P1",
    name: str = "Birlanu Premium Tea 500g",
    category: str = "Tea",
    **overrides: object,
) -> Product:
    """Create a Product with sensible defaults for any omitted field."""
    fields: dict[str, object] = {
        "price": 200.0,
        "mrp": 250.0,
        "rating": 4.5,
        "in_stock": True,
        "description": "Premium quality tea leaves",
        "schemes": ("Buy 10 Get 1 Free",),
        "min_order_qty": 12,
        "unit": "boxes",
    }
    fields.update(overrides)
    return Product(
        id=product_id, name=name, category=category, **fields  # type: ignore[arg-type]
    )
