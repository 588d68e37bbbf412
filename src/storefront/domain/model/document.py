"""Document aggregate — the single persisted root.

The Document owns both record collections. Records stay plain JSON objects
so that caller-supplied product fields survive a load/save cycle untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

COLLECTIONS = ("products", "orders")


@dataclass
class Document:
    """Aggregate root holding the ``products`` and ``orders`` collections.

    Invariant: both collections are always lists. ``from_raw`` coerces a
    missing or mistyped collection to an empty list, one field at a time.
    """

    products: list[dict[str, Any]] = field(default_factory=list)
    orders: list[dict[str, Any]] = field(default_factory=list)

    # Top-level keys other than the two collections, written back untouched
    extra: dict[str, Any] = field(default_factory=dict)

    # Names of collections that had to be defaulted while parsing
    defaulted: tuple[str, ...] = field(default=(), compare=False, repr=False)

    @staticmethod
    def empty() -> Document:
        return Document()

    @staticmethod
    def from_raw(raw: Any) -> Document:
        """Build a Document from parsed JSON.

        Raises ValueError when *raw* is not a JSON object at all; that is a
        malformed document, not one that can be repaired field by field.
        """
        if not isinstance(raw, dict):
            raise ValueError(
                f"Document root must be an object, got {type(raw).__name__}"
            )

        collections: dict[str, list[dict[str, Any]]] = {}
        defaulted: list[str] = []
        for name in COLLECTIONS:
            value = raw.get(name)
            if isinstance(value, list):
                collections[name] = value
            else:
                collections[name] = []
                defaulted.append(name)

        return Document(
            products=collections["products"],
            orders=collections["orders"],
            extra={k: v for k, v in raw.items() if k not in COLLECTIONS},
            defaulted=tuple(defaulted),
        )

    def to_raw(self) -> dict[str, Any]:
        return {
            "products": self.products if self.products is not None else [],
            "orders": self.orders if self.orders is not None else [],
            **{k: v for k, v in (self.extra or {}).items() if k not in COLLECTIONS},
        }
