# src/models/cart.py

"""Cart model: an ordered mapping of product id to cart line."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.models.cart_line import CartLine


@dataclass(frozen=True)
class Cart:
    """Immutable cart value.

    Holds at most one line per product id.  Insertion order is kept for
    display only and takes no part in equality.
    """

    lines: Mapping[str, CartLine] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy behind a read-only view so callers cannot edit the lines
        object.__setattr__(self, "lines", MappingProxyType(dict(self.lines)))

    @classmethod
    def from_lines(cls, lines: list[CartLine]) -> "Cart":
        """Build a cart from lines, merging repeated ids by quantity."""
        merged: dict[str, CartLine] = {}
        for line in lines:
            existing = merged.get(line.id)
            if existing is None:
                merged[line.id] = line
            else:
                merged[line.id] = existing.with_quantity(
                    existing.quantity + line.quantity
                )
        return cls(lines=merged)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines.values())

    def __contains__(self, product_id: object) -> bool:
        return product_id in self.lines

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cart):
            return NotImplemented
        return dict(self.lines) == dict(other.lines)

    def __hash__(self) -> int:
        return hash(frozenset(self.lines.items()))

    def get(self, product_id: str) -> CartLine | None:
        """Return the line for *product_id*, or ``None``."""
        return self.lines.get(product_id)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def total_quantity(self) -> int:
        """Sum of quantities over all lines, computed on every call."""
        return sum(line.quantity for line in self.lines.values())
