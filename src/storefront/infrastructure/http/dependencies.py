"""FastAPI dependencies shared by the route modules."""

from __future__ import annotations

from typing import Any

from fastapi import Request

from storefront.domain.repository.document_store import DocumentStore


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def field_of(payload: Any, name: str) -> Any:
    """Read one field from a JSON body that may not be an object."""
    if isinstance(payload, dict):
        return payload.get(name)
    return None
