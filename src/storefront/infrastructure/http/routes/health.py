"""Liveness probe."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from storefront.domain.model.order import iso_timestamp

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health_check():
    """Returns 200 whenever the process is up."""
    return {"status": "ok", "timestamp": iso_timestamp(datetime.now(timezone.utc))}
