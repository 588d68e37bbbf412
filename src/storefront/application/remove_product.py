"""Application service: Remove Product use case."""

from __future__ import annotations

from typing import Any

from storefront.application.common import parse_record_id, save_or_raise
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import product_index
from storefront.domain.repository.document_store import DocumentStore


class RemoveProductHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self, product_id: str | int) -> dict[str, Any]:
        """Remove a product and return the removed record."""
        pid = parse_record_id(product_id)

        with self._store.lock():
            document = self._store.load().document
            index = product_index(document.products, pid)
            if index is None:
                raise EntityNotFoundError("Product not found")

            removed = document.products.pop(index)
            save_or_raise(self._store, document, "Error removing product")

        return removed
