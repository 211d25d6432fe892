from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from .errors import InvalidArgumentError
from .kinds import is_number
from .record import FrozenRecord


def total_price(product: Any) -> Union[int, float]:
    """
    price * quantity for a product record. Hidden fields count.
    """
    if not isinstance(product, Mapping):
        raise InvalidArgumentError(code="argument.not_object", message="Invalid product object")

    def has(name: str) -> bool:
        if isinstance(product, FrozenRecord):
            return product.has_own(name)
        return name in product

    if not has("price") or not has("quantity"):
        raise InvalidArgumentError(
            code="product.fields_missing",
            message="Product object must have price and quantity properties",
        )
    price = product["price"]
    quantity = product["quantity"]
    if not is_number(price) or not is_number(quantity) or price < 0 or quantity < 0:
        raise InvalidArgumentError(
            code="product.invalid_values",
            message="Price and quantity must be positive numbers",
            data={"price": repr(price), "quantity": repr(quantity)},
        )
    return price * quantity
