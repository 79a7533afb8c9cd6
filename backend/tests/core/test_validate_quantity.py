"""Quantity Validation tests — non-negative ingredient quantities.

Tests cover:
    - Zero, positive and fractional quantities accepted
    - Negative quantities rejected with INVALID_QUANTITY descriptor
    - NaN and infinities rejected
    - enforce_quantity raises QuantityValidationError (400, validation category)
"""

import math

import pytest

from recipe_catalog.core.errors import ErrorCategory, QuantityValidationError
from recipe_catalog.core.validate_quantity import enforce_quantity, validate_quantity


@pytest.mark.parametrize("quantity", [0.0, 0, 5.0, 0.25, 1e6])
def test_non_negative_quantities_are_accepted(quantity):
    assert validate_quantity(quantity) is None


@pytest.mark.parametrize("quantity", [-5.0, -0.001, -1])
def test_negative_quantities_are_rejected(quantity):
    result = validate_quantity(quantity)
    assert result["status"] == "rejected"
    assert result["error_code"] == "INVALID_QUANTITY"
    assert result["quantity"] == quantity


@pytest.mark.parametrize("quantity", [math.nan, math.inf, -math.inf, float("1e999")])
def test_non_finite_quantities_are_rejected(quantity):
    assert validate_quantity(quantity) is not None


def test_enforce_rejects_infinity():
    with pytest.raises(QuantityValidationError):
        enforce_quantity(math.inf)


def test_enforce_returns_accepted_quantity():
    assert enforce_quantity(2.5) == 2.5


def test_enforce_raises_client_error_for_negative():
    with pytest.raises(QuantityValidationError) as exc_info:
        enforce_quantity(-5.0)
    assert exc_info.value.http_status == 400
    assert exc_info.value.category is ErrorCategory.VALIDATION
    assert exc_info.value.context.field_name == "quantity"
