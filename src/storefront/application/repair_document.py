"""Application service: Check / Repair Document use case.

A load that had to recover from a corrupt file, or had to default a
collection, never writes anything by itself. This handler reports that
state and, when asked, writes the sanitized document back.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.application.common import save_or_raise
from storefront.domain.repository.document_store import DocumentStore


@dataclass(frozen=True)
class DocumentHealthDTO:
    recovered: bool
    cause: str | None
    defaulted: tuple[str, ...]
    product_count: int
    order_count: int
    repaired: bool = False

    @property
    def needs_repair(self) -> bool:
        return self.recovered or bool(self.defaulted)


class RepairDocumentHandler:

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def handle(self, repair: bool = False) -> DocumentHealthDTO:
        with self._store.lock():
            result = self._store.load()
            document = result.document
            report = DocumentHealthDTO(
                recovered=result.recovered,
                cause=getattr(result, "cause", None),
                defaulted=document.defaulted,
                product_count=len(document.products),
                order_count=len(document.orders),
            )
            if not (repair and report.needs_repair):
                return report

            save_or_raise(self._store, document, "Error repairing data file")

        return replace(report, repaired=True)
