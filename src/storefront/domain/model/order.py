"""Order records and their status lifecycle.

Order ids are assigned by the system, derived purely from the current
collection contents (``max + 1``), so they survive a restart unchanged.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from storefront.domain.exceptions import ValidationError


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(value: Any) -> OrderStatus:
        """Return the status named by *value*.

        Any listed status may move to any other; only unknown values are
        rejected.
        """
        if isinstance(value, str):
            for status in OrderStatus:
                if status.value == value:
                    return status
        raise ValidationError("Invalid status")


def next_order_id(orders: list[dict[str, Any]]) -> int:
    ids = [
        o["id"]
        for o in orders
        if isinstance(o, dict) and isinstance(o.get("id"), int)
    ]
    if not ids:
        return 1
    return max(ids) + 1


def order_index(orders: list[dict[str, Any]], order_id: int) -> int | None:
    for i, order in enumerate(orders):
        if isinstance(order, dict) and order.get("id") == order_id:
            return i
    return None


def find_order(orders: list[dict[str, Any]], order_id: int) -> dict[str, Any] | None:
    index = order_index(orders, order_id)
    return orders[index] if index is not None else None


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. ``2024-05-01T12:30:00.000Z``."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _trimmed(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return value.strip() if isinstance(value, str) else ""


def build_order(
    payload: dict[str, Any], order_id: int, now: datetime
) -> dict[str, Any]:
    """Build a new order record from an already validated payload."""
    local = now.astimezone()
    return {
        "id": order_id,
        "customerName": payload["customerName"].strip(),
        "email": _trimmed(payload, "email"),
        "phone": _trimmed(payload, "phone"),
        "items": payload["items"],
        "total": payload["total"],
        "notes": _trimmed(payload, "notes"),
        "createdDate": local.strftime("%d/%m/%Y"),
        "createdTime": local.strftime("%H:%M:%S"),
        "status": OrderStatus.PENDING.value,
        "createdAtIso": iso_timestamp(now),
    }


def apply_status(order: dict[str, Any], status: OrderStatus, now: datetime) -> None:
    order["status"] = status.value
    order["updatedAtIso"] = iso_timestamp(now)


def _created_at(order: Any) -> datetime | None:
    raw = order.get("createdAtIso") if isinstance(order, dict) else None
    if not isinstance(raw, str):
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_newest_first(orders: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return a new list ordered by ``createdAtIso`` descending.

    Orders without a readable timestamp go last, in storage order.
    """
    dated = [(o, _created_at(o)) for o in orders]
    with_date = [pair for pair in dated if pair[1] is not None]
    without_date = [o for o, moment in dated if moment is None]
    with_date.sort(key=lambda pair: pair[1], reverse=True)
    return [o for o, _ in with_date] + without_date
