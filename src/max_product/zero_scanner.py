"""Zero-Segmented Scanner: максимальное произведение для беззнаковых целых

Один проход слева направо. Ноль обрывает текущий участок, поэтому
произведение никогда не считается через нулевой элемент: внутри участка
без нулей все множители >= 1 и бегущее произведение не убывает.

Tie-break: кандидат заменяется только при строгом `>`, поэтому из
нескольких диапазонов с одинаковым произведением возвращается первый
(с наименьшим start, затем с наименьшим end).

Сложность: O(n) по времени, O(1) дополнительной памяти.
"""

from collections.abc import Sequence
from typing import Any

from src.core.domain.numeric import UNSIGNED_DOMAIN, UnsignedDomain
from src.core.domain.segment import IndexRange, Run
from src.max_product.errors import EmptySequenceError


def scan_zero_free_runs(
    values: Sequence[Any],
    domain: UnsignedDomain = UNSIGNED_DOMAIN,
) -> Run:
    """
    Поиск участка с максимальным произведением.

    Args:
        values: Непустая последовательность беззнаковых целых
        domain: Числовой домен (ноль и единица типа)

    Returns:
        Run(product, start, end) — лучший найденный участок. Если все
        элементы нулевые, возвращается Run(zero, 0, 0).

    Raises:
        EmptySequenceError: Если последовательность пустая
    """
    if len(values) == 0:
        raise EmptySequenceError("max product of an empty sequence is undefined")

    zero = domain.zero
    best = Run(zero, 0, 0)

    current_start = current_end = 0
    # zero означает «нет активного участка»
    current_prod = zero

    for i, value in enumerate(values):
        if not domain.is_zero(value):
            if domain.is_zero(current_prod):
                current_prod = domain.one
                current_start = i
            current_prod = current_prod * value
            current_end = i
        else:
            current_start = current_end = i
            current_prod = zero

        if current_prod > best.product:
            best = Run(current_prod, current_start, current_end)

    return best


def max_product_unsigned(
    values: Sequence[Any],
    domain: UnsignedDomain = UNSIGNED_DOMAIN,
) -> IndexRange:
    """
    Диапазон индексов с максимальным произведением (беззнаковые целые).

    Examples:
        >>> max_product_unsigned([0, 2, 3, 4]).as_tuple()
        (1, 3)
        >>> max_product_unsigned([0, 1, 0, 7, 0, 3]).as_tuple()
        (3, 3)
    """
    return scan_zero_free_runs(values, domain).span()
