"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from storefront.infrastructure.persistence.json_document_store import (
    JsonDocumentStore,
)
from storefront.infrastructure.settings import get_settings


@lru_cache
def _store_for(file_path: Path) -> JsonDocumentStore:
    # One store (and one write lock) per data file per process
    return JsonDocumentStore(file_path)


def document_store(file_path: Path | None = None) -> JsonDocumentStore:
    if file_path is None:
        file_path = get_settings().data_file
    return _store_for(Path(file_path).resolve())
