# src/models/cart_line.py

"""Cart line model: a product snapshot plus a cumulative quantity."""

from dataclasses import asdict, dataclass, field, replace

from src.models.product import Product


@dataclass(frozen=True)
class CartLine:
    """One aggregated cart entry.

    Product fields are copied when the line is first created, so later
    catalog changes never reach an existing line.
    """

    id: str
    name: str
    category: str
    price: float
    mrp: float
    quantity: int
    rating: float = 0.0
    in_stock: bool = True
    description: str = ""
    schemes: tuple[str, ...] = field(default_factory=tuple)
    min_order_qty: int = 1
    unit: str = ""
    image: str = ""

    @classmethod
    def from_product(cls, product: Product, quantity: int) -> "CartLine":
        """Snapshot *product* into a new line holding *quantity*."""
        return cls(quantity=quantity, **asdict(product))

    def with_quantity(self, quantity: int) -> "CartLine":
        """Return a copy of this line with a different quantity."""
        return replace(self, quantity=quantity)

    def to_product(self) -> Product:
        """Recover the product snapshot captured by this line."""
        fields = asdict(self)
        fields.pop("quantity")
        return Product(**fields)
