"""Application service: List Products use case (query)."""

from __future__ import annotations

from typing import Any

from storefront.domain.repository.document_store import DocumentStore


class ListProductsHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self) -> list[dict[str, Any]]:
        """Return every product in storage (creation) order."""
        with self._store.lock():
            return self._store.load().document.products
