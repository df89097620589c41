"""Segment Compressor: сжатие последовательности вещественных в run'ы

Последовательность неотрицательных вещественных разбивается на чередующиеся
участки «ниже единицы» и «не ниже единицы», каждый из которых сворачивается
в Run(product, start, end).

Порядок работы:
1. Ведущие элементы < 1 пропускаются; запоминается наибольший из них.
   Произведение двух чисел < 1 меньше каждого из них, поэтому для
   последовательности целиком из таких элементов ответ — один элемент.
2. Остаток разбивается на участки, начиная с участка «не ниже единицы».
3. Завершающий участок «ниже единицы» отбрасывается: он может только
   уменьшить произведение.

Ровно единица произведение не меняет. Единицы в начале растущего участка
принадлежат ему (раньше start), единицы в его хвосте отрезаются (раньше end)
и переходят в следующий участок «ниже единицы».

Сложность: O(n) по времени, O(число run'ов) памяти.
"""

import logging
from collections.abc import Sequence
from typing import Any

from src.core.domain.numeric import FLOAT_DOMAIN, RealDomain
from src.core.domain.segment import Run
from src.max_product.errors import EmptySequenceError

_logger = logging.getLogger(__name__)


def compress_runs(values: Sequence[Any], domain: RealDomain = FLOAT_DOMAIN) -> list[Run]:
    """
    Сжатие последовательности в чередующийся список run'ов.

    Args:
        values: Непустая последовательность неотрицательных вещественных
        domain: Числовой домен (ноль, единица, сравнение с единицей)

    Returns:
        Непустой список Run. Либо один синтетический Run(max, idx, idx),
        если все элементы < 1, либо список нечётной длины вида
        [не ниже, ниже, не ниже, ..., не ниже].

    Raises:
        EmptySequenceError: Если последовательность пустая

    Examples:
        >>> compress_runs([0.5, 2.0, 3.0, 0.5, 4.0])
        [Run(product=6.0, start=1, end=2), Run(product=0.5, start=3, end=3), Run(product=4.0, start=4, end=4)]
    """
    n = len(values)
    if n == 0:
        raise EmptySequenceError("cannot compress an empty sequence")

    # 1. Ведущие элементы < 1
    start = 0
    best_single = domain.zero
    best_single_idx = 0

    while start < n and domain.is_below_one(values[start]):
        if values[start] > best_single:
            best_single = values[start]
            best_single_idx = start
        start += 1

    if start == n:
        return [Run(best_single, best_single_idx, best_single_idx)]

    # 2. Чередующиеся участки
    runs: list[Run] = []
    growing = True
    run_product = values[start]
    # Последний индекс растущего участка без хвостовых единиц
    run_end = start

    for i in range(start + 1, n):
        value = values[i]

        if growing:
            if domain.is_below_one(value):
                runs.append(Run(run_product, start, run_end))
                growing = False
                start = run_end + 1
                run_product = value
            else:
                run_product = run_product * value
                if domain.is_above_one(value):
                    run_end = i
        else:
            if domain.is_below_one(value):
                run_product = run_product * value
            else:
                runs.append(Run(run_product, start, i - 1))
                growing = True
                start = run_end = i
                run_product = value

    # 3. Завершающий участок «ниже единицы» не может входить в ответ
    if growing:
        runs.append(Run(run_product, start, run_end))

    _logger.debug("compressed %d values into %d runs", n, len(runs))

    return runs
