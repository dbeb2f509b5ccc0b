# src/services/cart_aggregator.py

"""Cart aggregation with write-through persistence."""

import logging
from collections.abc import Callable

from src.config.settings import Settings
from src.errors import InvalidInputError, OutOfStockError
from src.models.cart import Cart
from src.models.cart_line import CartLine
from src.models.product import Product
from src.storage.cart_codec import deserialize_cart, serialize_cart
from src.storage.kv_store import KeyValueStore

logger = logging.getLogger("catalog_cart.cart")

# Called with (product name, quantity added, unit) after each add
Notifier = Callable[[str, int, str], None]


def add_to_cart(
    cart: Cart,
    product: Product,
    quantity: int | None = None,
) -> Cart:
    """Return a new cart with *quantity* of *product* added.

    *quantity* defaults to the product's minimum order quantity.  An
    existing line keeps its original snapshot and only gains quantity;
    an unknown id is appended as a new line.  *cart* is not modified.

    Raises:
        InvalidInputError: empty product id, or a quantity that is not
            a positive integer.
        OutOfStockError: the product is flagged as out of stock.
    """
    if not product.id or not product.id.strip():
        msg = "Cannot add a product without an id"
        raise InvalidInputError(msg)

    qty = product.min_order_qty if quantity is None else quantity
    if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
        msg = f"Quantity must be a positive integer, got {qty!r}"
        raise InvalidInputError(msg)

    if not product.in_stock:
        raise OutOfStockError(product.id)

    lines = dict(cart.lines)
    existing = lines.get(product.id)
    if existing is None:
        lines[product.id] = CartLine.from_product(product, qty)
    else:
        lines[product.id] = existing.with_quantity(existing.quantity + qty)
    return Cart(lines=lines)


def notification_message(name: str, quantity: int, unit: str) -> tuple[str, str]:
    """Title and body for the "added to cart" notice."""
    return "Added to Cart", f"{name} ({quantity} {unit}) added to cart"


class CartAggregator:
    """Session cart bound to a key-value store.

    The in-memory cart is the source of truth for the session.  Every
    successful add is followed by a full rewrite of the stored cart;
    a failed write is logged and the in-memory change is kept.
    """

    def __init__(
        self,
        store: KeyValueStore,
        notifier: Notifier | None = None,
        storage_key: str = Settings.CART_STORAGE_KEY,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._key = storage_key
        self._cart = Cart()

    @property
    def cart(self) -> Cart:
        return self._cart

    def hydrate(self) -> Cart:
        """Replace the in-memory cart with the stored one.

        A missing, unreadable or malformed value yields an empty cart.
        """
        try:
            payload = self._store.get(self._key)
        except Exception as exc:
            logger.error(
                "Cart store read failed for key '%s': %s",
                self._key,
                exc,
                exc_info=True,
            )
            payload = None

        try:
            self._cart = deserialize_cart(payload)
        except Exception as exc:
            logger.error(
                "Cart decode failed for key '%s': %s",
                self._key,
                exc,
                exc_info=True,
            )
            self._cart = Cart()

        logger.info(
            "Hydrated cart with %d lines (%d items)",
            len(self._cart),
            self._cart.total_quantity(),
        )
        return self._cart

    def add(self, product: Product, quantity: int | None = None) -> Cart:
        """Add *product* to the session cart and persist the result."""
        qty = product.min_order_qty if quantity is None else quantity
        self._cart = add_to_cart(self._cart, product, qty)
        logger.info(
            "Added %d %s of %s to cart", qty, product.unit, product.id,
        )

        self._persist()
        self._notify(product, qty)
        return self._cart

    def total_items(self) -> int:
        """Total quantity across all lines."""
        return self._cart.total_quantity()

    def _persist(self) -> None:
        """Write the full cart under the storage key."""
        try:
            self._store.set(self._key, serialize_cart(self._cart))
        except Exception as exc:
            logger.error(
                "Cart persistence failed for key '%s': %s",
                self._key,
                exc,
                exc_info=True,
            )

    def _notify(self, product: Product, quantity: int) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier(product.name, quantity, product.unit)
        except Exception as exc:
            logger.error("Cart notifier failed: %s", exc, exc_info=True)
