"""Max Product — линейные алгоритмы поиска подпоследовательности с максимальным произведением.

- Zero-Segmented Scanner: беззнаковые целые, ноль обрывает участок
- Segment Compressor: сжатие вещественных в чередующиеся run'ы
- Stack Reducer: свёртка run'ов тройками справа налево
- MaxProductSolver: фасад с валидацией и проверкой агрегата
"""

from .errors import (
    EmptySequenceError,
    InvalidElementError,
    MaxProductError,
    ProductMismatchError,
    ProductOverflowError,
)
from .zero_scanner import max_product_unsigned, scan_zero_free_runs
from .compressor import compress_runs
from .stack_reducer import find_max_product_run, max_product_real, reduce_runs
from .solver import MaxProductConfig, MaxProductSolver

__all__ = [
    # Errors
    "MaxProductError",
    "EmptySequenceError",
    "InvalidElementError",
    "ProductMismatchError",
    "ProductOverflowError",
    # Integer path
    "scan_zero_free_runs",
    "max_product_unsigned",
    # Real path
    "compress_runs",
    "reduce_runs",
    "find_max_product_run",
    "max_product_real",
    # Facade
    "MaxProductConfig",
    "MaxProductSolver",
]
