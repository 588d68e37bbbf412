"""Application service: Update Order Status use case.

The status is checked before the order is looked up, so an invalid value
is rejected without touching storage.
"""

from __future__ import annotations

from typing import Any

from storefront.application.common import (
    Clock,
    parse_record_id,
    save_or_raise,
    utc_now,
)
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus, apply_status, find_order
from storefront.domain.repository.document_store import DocumentStore


class UpdateOrderStatusHandler:

    def __init__(self, store: DocumentStore, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock

    def handle(self, order_id: str | int, status: Any) -> dict[str, Any]:
        oid = parse_record_id(order_id)
        new_status = OrderStatus.parse(status)

        with self._store.lock():
            document = self._store.load().document
            order = find_order(document.orders, oid)
            if order is None:
                raise EntityNotFoundError("Order not found")

            apply_status(order, new_status, self._clock())
            save_or_raise(self._store, document, "Error updating order")

        return order
