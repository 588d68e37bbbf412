"""Application service: Remove Order use case."""

from __future__ import annotations

from typing import Any

from storefront.application.common import parse_record_id, save_or_raise
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import order_index
from storefront.domain.repository.document_store import DocumentStore


class RemoveOrderHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self, order_id: str | int) -> dict[str, Any]:
        """Remove an order and return the removed record."""
        oid = parse_record_id(order_id)

        with self._store.lock():
            document = self._store.load().document
            index = order_index(document.orders, oid)
            if index is None:
                raise EntityNotFoundError("Order not found")

            removed = document.orders.pop(index)
            save_or_raise(self._store, document, "Error removing order")

        return removed
