# src/storage/cart_codec.py

"""JSON encoding of a cart for the key-value store.

The wire format is an array of records using camelCase keys
(``inStock``, ``minOrderQty``), the same shape a browser front-end keeps
in ``localStorage``.  Decoding is strict about field types and fails
closed: any malformed payload yields an empty cart.
"""

import json
import logging
import math
from typing import Any

from src.models.cart import Cart
from src.models.cart_line import CartLine
from src.models.product import Product

logger = logging.getLogger("catalog_cart.storage")

# Everything a hostile or truncated payload can raise while decoding
_DECODE_ERRORS = (
    json.JSONDecodeError,
    KeyError,
    TypeError,
    ValueError,
    OverflowError,
    RecursionError,
)

_MISSING = object()


def _field(record: dict[str, Any], key: str, default: object) -> Any:
    """Fetch *key*, raising ``KeyError`` when it is required and absent."""
    if default is _MISSING:
        return record[key]
    return record.get(key, default)


def _text(record: dict[str, Any], key: str, default: object = _MISSING) -> str:
    value = _field(record, key, default)
    if not isinstance(value, str):
        msg = f"{key} must be a string, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _number(record: dict[str, Any], key: str, default: object = _MISSING) -> float:
    value = _field(record, key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{key} must be a number, got {type(value).__name__}"
        raise TypeError(msg)
    number = float(value)
    if not math.isfinite(number):
        msg = f"{key} must be finite, got {value!r}"
        raise ValueError(msg)
    return number


def _integer(record: dict[str, Any], key: str, default: object = _MISSING) -> int:
    value = _field(record, key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{key} must be an integer, got {value!r}"
        raise TypeError(msg)
    return value


def _flag(record: dict[str, Any], key: str, default: object = _MISSING) -> bool:
    value = _field(record, key, default)
    if not isinstance(value, bool):
        msg = f"{key} must be a boolean, got {value!r}"
        raise TypeError(msg)
    return value


def product_from_record(record: dict[str, Any]) -> Product:
    """Build a Product from a camelCase record.

    Values are never coerced: a wrong type raises ``TypeError``, a
    missing required key ``KeyError``, and a blank id, non-finite number
    or non-positive ``minOrderQty`` raises ``ValueError``.
    """
    product_id = _text(record, "id")
    if not product_id.strip():
        msg = "id must not be blank"
        raise ValueError(msg)

    schemes = _field(record, "schemes", [])
    if not isinstance(schemes, list) or not all(
        isinstance(s, str) for s in schemes
    ):
        msg = "schemes must be a list of strings"
        raise TypeError(msg)

    min_order_qty = _integer(record, "minOrderQty", 1)
    if min_order_qty <= 0:
        msg = f"minOrderQty must be positive, got {min_order_qty}"
        raise ValueError(msg)

    return Product(
        id=product_id,
        name=_text(record, "name"),
        category=_text(record, "category"),
        price=_number(record, "price"),
        mrp=_number(record, "mrp"),
        rating=_number(record, "rating", 0.0),
        in_stock=_flag(record, "inStock", True),
        description=_text(record, "description", ""),
        schemes=tuple(schemes),
        min_order_qty=min_order_qty,
        unit=_text(record, "unit", ""),
        image=_text(record, "image", ""),
    )


def product_to_record(product: Product) -> dict[str, Any]:
    """Serialise a Product to a camelCase record."""
    return {
        "id": product.id,
        "name": product.name,
        "category": product.category,
        "price": product.price,
        "mrp": product.mrp,
        "image": product.image,
        "rating": product.rating,
        "inStock": product.in_stock,
        "description": product.description,
        "schemes": list(product.schemes),
        "minOrderQty": product.min_order_qty,
        "unit": product.unit,
    }


def line_to_record(line: CartLine) -> dict[str, Any]:
    """Serialise a cart line: its product snapshot plus quantity."""
    return {**product_to_record(line.to_product()), "quantity": line.quantity}


def serialize_cart(cart: Cart) -> str:
    """Encode every cart line, in display order, as a JSON array."""
    return json.dumps([line_to_record(line) for line in cart], ensure_ascii=False)


def deserialize_cart(payload: str | None) -> Cart:
    """Decode a stored cart; absent or malformed input gives an empty cart."""
    if not payload:
        return Cart()

    try:
        data = json.loads(payload)
        if not isinstance(data, list):
            msg = f"expected a JSON array, got {type(data).__name__}"
            raise TypeError(msg)
        lines: list[CartLine] = []
        for record in data:
            if not isinstance(record, dict):
                msg = f"expected an object, got {type(record).__name__}"
                raise TypeError(msg)
            product = product_from_record(record)
            quantity = _integer(record, "quantity")
            if quantity <= 0:
                msg = f"quantity must be positive, got {quantity}"
                raise ValueError(msg)
            lines.append(CartLine.from_product(product, quantity))
    except _DECODE_ERRORS as exc:
        logger.warning(
            "Discarding malformed persisted cart: %s", exc,
        )
        return Cart()

    return Cart.from_lines(lines)
