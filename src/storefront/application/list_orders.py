"""Application service: List Orders use case (query)."""

from __future__ import annotations

from typing import Any

from storefront.domain.model.order import sort_newest_first
from storefront.domain.repository.document_store import DocumentStore


class ListOrdersHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self) -> list[dict[str, Any]]:
        """Return all orders, newest first. Storage order is left alone."""
        with self._store.lock():
            orders = self._store.load().document.orders
        return sort_newest_first(orders)
