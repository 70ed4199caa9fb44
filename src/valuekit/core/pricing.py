"""Order total computation with optional per-line discounts."""

from __future__ import annotations

from collections.abc import Sequence

from valuekit.core.models import Number, Product


def line_total(product: Product) -> Number:
    """Return ``price * quantity`` net of the product's discount.

    The discount applies only when one is present (``discount is not
    None``); a present ``0`` subtracts nothing, same as an absent one.
    """
    subtotal = product.price * product.quantity
    if product.discount is None:
        return subtotal
    return subtotal - subtotal * (product.discount / 100)


def calculate_total_price(products: Sequence[Product]) -> Number:
    """Sum :func:`line_total` over *products*; ``0`` when empty.

    Negative prices, quantities, or discounts are not rejected.
    """
    if not products:
        return 0
    return sum(line_total(product) for product in products)
