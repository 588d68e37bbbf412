"""Application service: Create Order use case.

The store assigns the id; the server clock stamps the creation time.
"""

from __future__ import annotations

from typing import Any

from storefront.application.common import Clock, save_or_raise, utc_now
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import build_order, next_order_id
from storefront.domain.repository.document_store import DocumentStore
from storefront.domain.validators import validate_order


class CreateOrderHandler:

    def __init__(self, store: DocumentStore, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock

    def handle(self, payload: Any) -> dict[str, Any]:
        """Create a new order.

        Steps:
        1. Validate the submission (nothing is stored on failure).
        2. Assign ``max(existing ids) + 1``.
        3. Build the record with trimmed text fields and timestamps.
        4. Append and persist the whole document.
        """
        result = validate_order(payload)
        if not result.valid:
            raise ValidationError(result.reason)

        with self._store.lock():
            document = self._store.load().document
            order = build_order(payload, next_order_id(document.orders), self._clock())
            document.orders.append(order)
            save_or_raise(self._store, document, "Error saving order")

        return order
