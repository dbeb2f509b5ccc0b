# src/models/product.py

"""Product data model for the read-only catalog."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    """A purchasable catalog item.

    ``price <= mrp`` is expected of catalog data but not enforced here.
    ``schemes`` are promotional labels with no effect on price.
    """

    id: str
    name: str
    category: str
    price: float
    mrp: float
    rating: float = 0.0
    in_stock: bool = True
    description: str = ""
    schemes: tuple[str, ...] = field(default_factory=tuple)
    min_order_qty: int = 1
    unit: str = ""
    image: str = ""
