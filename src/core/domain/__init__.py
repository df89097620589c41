"""
Domain models and value objects.

Contains numeric capability domains, runs, index ranges and results.
"""

from src.core.domain.numeric import (
    DECIMAL_DOMAIN,
    FLOAT_DOMAIN,
    FRACTION_DOMAIN,
    UNSIGNED_DOMAIN,
    RealDomain,
    UnsignedDomain,
)
from src.core.domain.result import Algorithm, MaxProductResult
from src.core.domain.segment import IndexRange, Run

__all__ = [
    # Numeric domains
    "RealDomain",
    "UnsignedDomain",
    "FLOAT_DOMAIN",
    "FRACTION_DOMAIN",
    "DECIMAL_DOMAIN",
    "UNSIGNED_DOMAIN",
    # Segments
    "IndexRange",
    "Run",
    # Results
    "Algorithm",
    "MaxProductResult",
]
