"""Quantity Validation — the non-negative ingredient quantity invariant.

Invariants:
    - validate_quantity is PURE: returns an error descriptor, never raises
    - 0 and any positive value (fractional included) are accepted
    - Negative values, NaN and infinities are rejected
    - The same check runs on create and on update (the replacement value, not a delta)

Design Decisions:
    - One predicate shared by schemas, catalog service and the ORM hook:
      every persistence path agrees on the same boundary
"""

import math

from recipe_catalog.core.errors import QuantityValidationError


def validate_quantity(quantity: float) -> dict | None:
    """Return an error descriptor unless quantity is finite and non-negative."""
    if not math.isfinite(quantity) or quantity < 0:
        return {
            "status": "rejected",
            "error_code": "INVALID_QUANTITY",
            "quantity": quantity,
            "message": f"quantity must be a finite non-negative number (got {quantity})",
        }
    return None


def enforce_quantity(quantity: float) -> float:
    """Raise QuantityValidationError for a rejected quantity; return it otherwise."""
    if validate_quantity(quantity) is not None:
        raise QuantityValidationError(quantity)
    return quantity
