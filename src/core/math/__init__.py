"""
Core math modules

Численные примитивы: валидация, сравнение с толерантностью,
пересчёт произведения по диапазону.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PRODUCT_REL,
    # NaN/Inf detection
    is_valid_float,
    # Epsilon comparisons
    is_close,
    # Validation
    validate_non_negative,
    validate_unsigned_integer,
)

# Products
from src.core.math.products import (
    products_match,
    range_product,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PRODUCT_REL",
    # Numerical Safeguards — NaN/Inf detection
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    "validate_unsigned_integer",
    # Products
    "products_match",
    "range_product",
]
