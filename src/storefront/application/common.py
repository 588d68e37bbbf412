"""Helpers shared by the application handlers."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Callable

from storefront.domain.exceptions import BadRequestError, PersistenceError
from storefront.domain.model.document import Document
from storefront.domain.repository.document_store import DocumentStore

Clock = Callable[[], datetime]

# Whole-string match: "12abc" and "1.5" are rejected, not truncated to 12 and 1
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_record_id(raw: str | int) -> int:
    """Turn a path segment into a record id, or raise BadRequestError."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and _INTEGER.fullmatch(raw):
        return int(raw)
    raise BadRequestError("Invalid id")


def save_or_raise(store: DocumentStore, document: Document, failure: str) -> None:
    """Persist *document*; a failed write becomes a PersistenceError."""
    if not store.save(document):
        raise PersistenceError(failure)
