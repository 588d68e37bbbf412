"""Application service: Show Product use case (query)."""

from __future__ import annotations

from typing import Any

from storefront.application.common import parse_record_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import find_product
from storefront.domain.repository.document_store import DocumentStore


class ShowProductHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self, product_id: str | int) -> dict[str, Any]:
        pid = parse_record_id(product_id)
        with self._store.lock():
            product = find_product(self._store.load().document.products, pid)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product
