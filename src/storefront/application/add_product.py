"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any

from storefront.application.common import save_or_raise
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import find_product
from storefront.domain.repository.document_store import DocumentStore
from storefront.domain.validators import validate_product


class AddProductHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self, payload: Any) -> dict[str, Any]:
        """Add a new product to the catalog.

        The caller picks the id; it must not collide with an existing one.
        """
        result = validate_product(payload)
        if not result.valid:
            raise ValidationError(result.reason)

        with self._store.lock():
            document = self._store.load().document

            if find_product(document.products, payload["id"]) is not None:
                raise ValidationError("Product with this id already exists")

            document.products.append(payload)
            save_or_raise(self._store, document, "Error saving product")

        return payload
