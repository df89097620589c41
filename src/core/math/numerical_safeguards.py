"""
Numerical Safeguards — валидация и сравнение чисел

Модуль обеспечивает проверку входных данных и сравнение float-результатов
для алгоритмов максимального произведения:
- NaN/Inf детекция для предотвращения распространения невалидных значений
- Epsilon-сравнения float с учётом машинной точности
- Валидация неотрицательности элементов последовательности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в алгоритм (отвергаются валидацией)
2. Float сравнения результатов всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from decimal import Decimal
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Относительная толерантность при пересчёте произведения по диапазону.
# Агрегат run'ов перемножается в другом порядке, чем прямой пересчёт.
EPS_PRODUCT_REL: Final[float] = 1e-9


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Поддерживает float, int, Fraction и Decimal.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN, Inf
        или значение не является числом

    Examples:
        >>> is_valid_float(1.5)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float(Decimal('Infinity'))
        False
    """
    if isinstance(value, bool):
        return False

    # int/Fraction всегда конечны (и могут не помещаться в float)
    if isinstance(value, numbers.Rational):
        return True

    if isinstance(value, Decimal):
        return value.is_finite()

    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: Any, name: str) -> None:
    """
    Валидация, что значение конечное и неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value!r}")


def validate_unsigned_integer(value: Any, name: str) -> None:
    """
    Валидация беззнакового целого.

    bool отвергается явно: True/False не являются элементами последовательности.

    Raises:
        ValueError: Если value не целое или value < 0
    """
    if isinstance(value, bool) or not _is_integral(value):
        raise ValueError(f"{name} must be an unsigned integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value!r}")


def _is_integral(value: Any) -> bool:
    # numpy integer scalars реализуют __index__, но не наследуют int
    try:
        value.__index__()
    except (AttributeError, TypeError):
        return False
    return True
