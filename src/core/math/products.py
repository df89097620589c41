"""
Products — пересчёт произведения по диапазону

Прямой (без сжатия и свёртки) пересчёт произведения элементов
values[start..end] включительно. Используется для проверки агрегатов,
которые вычисляют быстрые алгоритмы, и в демонстрационном выводе.
"""

import numbers
from collections.abc import Sequence
from fractions import Fraction
from typing import Any

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_PRODUCT_REL,
    is_close,
    is_valid_float,
)


def range_product(values: Sequence[Any], start: int, end: int, one: Any = 1) -> Any:
    """
    Произведение values[start..end] (включительно).

    Args:
        values: Последовательность чисел
        start: Начальный индекс
        end: Конечный индекс (включительно)
        one: Мультипликативная единица домена (1, 1.0, Fraction(1), ...)

    Returns:
        Произведение элементов диапазона

    Raises:
        ValueError: Если start > end
        IndexError: Если диапазон выходит за границы последовательности

    Examples:
        >>> range_product([2, 3, 4], 0, 2)
        24
        >>> range_product([0.5, 4.0], 1, 1, one=1.0)
        4.0
    """
    if start > end:
        raise ValueError(f"start must be <= end, got start={start}, end={end}")

    if start < 0 or end >= len(values):
        raise IndexError(
            f"range [{start}, {end}] out of bounds for sequence of length {len(values)}"
        )

    prod = one
    for k in range(start, end + 1):
        prod = prod * values[k]

    return prod


def products_match(expected: Any, actual: Any, rel_tol: float = EPS_PRODUCT_REL) -> bool:
    """
    Сравнение двух произведений.

    - int/Fraction с обеих сторон: точное равенство
    - float с обеих сторон: is_close с относительной толерантностью
    - Decimal и смешанные типы: та же толерантность, но в Fraction,
      поэтому значения за пределами float (10**400) не переполняются
    - NaN/Inf: обычное ==

    Examples:
        >>> products_match(Fraction(10**400), Fraction(10**400))
        True
        >>> products_match(Fraction(1, 2), 0.5)
        True
    """
    if isinstance(expected, numbers.Rational) and isinstance(actual, numbers.Rational):
        return expected == actual

    if not (is_valid_float(expected) and is_valid_float(actual)):
        return expected == actual

    if isinstance(expected, float) and isinstance(actual, float):
        return is_close(expected, actual, rel_tol=rel_tol)

    e = Fraction(expected)
    a = Fraction(actual)
    tolerance = max(Fraction(rel_tol) * max(abs(e), abs(a)), Fraction(EPS_FLOAT_COMPARE_ABS))
    return abs(e - a) <= tolerance
