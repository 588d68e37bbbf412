"""Application service: Show Order use case (query)."""

from __future__ import annotations

from typing import Any

from storefront.application.common import parse_record_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import find_order
from storefront.domain.repository.document_store import DocumentStore


class ShowOrderHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self, order_id: str | int) -> dict[str, Any]:
        oid = parse_record_id(order_id)
        with self._store.lock():
            order = find_order(self._store.load().document.orders, oid)
        if order is None:
            raise EntityNotFoundError("Order not found")
        return order
