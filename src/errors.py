# src/errors.py

"""Exceptions raised by the catalog and cart core."""


class InvalidInputError(ValueError):
    """An operation received an argument it cannot act on."""


class OutOfStockError(InvalidInputError):
    """A product flagged as unavailable was offered to the cart."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' is out of stock")
        self.product_id = product_id
