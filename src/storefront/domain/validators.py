"""Shape checks for candidate records.

Validators never raise: they return a ValidationResult carrying the reason
of the first failing check, so the caller decides how to report it.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: str | None = None

    @staticmethod
    def ok() -> ValidationResult:
        return ValidationResult(valid=True)

    @staticmethod
    def fail(reason: str) -> ValidationResult:
        return ValidationResult(valid=False, reason=reason)


def is_number(value: Any) -> bool:
    """True for JSON numbers. Booleans and non-finite floats are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_filled_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_product(candidate: Any) -> ValidationResult:
    """Check id -> name -> price, in that order."""
    if not isinstance(candidate, dict):
        return ValidationResult.fail("Invalid product")

    if not is_number(candidate.get("id")):
        return ValidationResult.fail("Invalid product id")

    if not is_filled_string(candidate.get("name")):
        return ValidationResult.fail("Invalid product name")

    price = candidate.get("price")
    if not is_number(price) or price < 0:
        return ValidationResult.fail("Invalid product price")

    return ValidationResult.ok()


def validate_order(candidate: Any) -> ValidationResult:
    """Check customer -> items -> total -> email, in that order."""
    if not isinstance(candidate, dict):
        return ValidationResult.fail("Invalid order")

    if not is_filled_string(candidate.get("customerName")):
        return ValidationResult.fail("Customer name is required")

    items = candidate.get("items")
    if not isinstance(items, list) or not items:
        return ValidationResult.fail("Order must contain at least one item")

    total = candidate.get("total")
    if not is_number(total) or total <= 0:
        return ValidationResult.fail("Invalid order total")

    # Email is optional: only a non-blank value is checked
    email = candidate.get("email")
    if email is not None and email != "":
        if not isinstance(email, str):
            return ValidationResult.fail("Invalid email")
        if email.strip() and not EMAIL_PATTERN.match(email):
            return ValidationResult.fail("Invalid email")

    return ValidationResult.ok()
