"""Product records.

Products carry a caller-chosen integer id, a name and a price, plus any
extra fields the caller sends. Extra fields are kept as-is.
"""

from __future__ import annotations

from typing import Any


def product_index(products: list[dict[str, Any]], product_id: int) -> int | None:
    """Return the position of the product with *product_id*, or None."""
    for i, product in enumerate(products):
        if isinstance(product, dict) and product.get("id") == product_id:
            return i
    return None


def find_product(
    products: list[dict[str, Any]], product_id: int
) -> dict[str, Any] | None:
    index = product_index(products, product_id)
    return products[index] if index is not None else None


def merge_product(
    existing: dict[str, Any], changes: dict[str, Any]
) -> dict[str, Any]:
    """Overlay *changes* onto *existing*, field by field.

    Fields absent from *changes* keep their current value.
    """
    return {**existing, **changes}
