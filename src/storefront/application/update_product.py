"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any

from storefront.application.common import parse_record_id, save_or_raise
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import merge_product, product_index
from storefront.domain.repository.document_store import DocumentStore
from storefront.domain.validators import validate_product


class UpdateProductHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self, product_id: str | int, payload: Any) -> dict[str, Any]:
        """Merge *payload* over the stored product.

        The payload must itself be a valid product. Fields the stored
        record has and the payload lacks are kept.
        """
        pid = parse_record_id(product_id)

        result = validate_product(payload)
        if not result.valid:
            raise ValidationError(result.reason)

        with self._store.lock():
            document = self._store.load().document
            index = product_index(document.products, pid)
            if index is None:
                raise EntityNotFoundError("Product not found")

            merged = merge_product(document.products[index], payload)
            document.products[index] = merged
            save_or_raise(self._store, document, "Error updating product")

        return merged
