"""Stack Reducer: свёртка run'ов в диапазон с максимальным произведением

Работает на выходе Segment Compressor: список run'ов чередуется
«не ниже единицы» / «ниже единицы» и заканчивается растущим run'ом.
Участок «ниже единицы» может войти в ответ только будучи зажатым между
двумя растущими участками, выигрыш которых перекрывает его потерю.

Шаг свёртки (атомарный): снять с конца три run'а a (правый), b, c (левый),
сложить combined = (a·b·c, c.start, a.end) и вернуть на место трёх
- combined, если combined.product > c.product (b поглощён);
- иначе c (продолжать вправо через b не выгодно, a и b отбрасываются).
После каждого шага кандидат обновляется по combined, a, c: строго большее
произведение, а при равном - диапазон с меньшим (start, end).

Run'ы снимаются справа, поэтому каждая рассматриваемая тройка непрерывна
в исходной последовательности.

Сложность: O(число run'ов) шагов, каждый шаг O(1).
"""

import logging
from collections.abc import Sequence
from typing import Any

from src.core.domain.numeric import FLOAT_DOMAIN, RealDomain
from src.core.domain.segment import IndexRange, Run
from src.max_product.compressor import compress_runs
from src.max_product.errors import EmptySequenceError

_logger = logging.getLogger(__name__)


def reduce_runs(runs: Sequence[Run]) -> Run:
    """
    Свёртка списка run'ов.

    Args:
        runs: Непустой список run'ов (выход compress_runs). Не изменяется.

    Returns:
        Run с максимальным произведением

    Raises:
        EmptySequenceError: Если список run'ов пустой
    """
    if len(runs) == 0:
        raise EmptySequenceError("cannot reduce an empty run list")

    stack = list(runs)
    best = stack[0]

    while len(stack) >= 3:
        a = stack.pop()
        b = stack.pop()
        c = stack.pop()

        combined = Run(a.product * b.product * c.product, c.start, a.end)

        if combined.product > c.product:
            stack.append(combined)
        else:
            stack.append(c)

        for candidate in (combined, a, c):
            if _improves(candidate, best):
                best = candidate

    return best


def _improves(candidate: Run, best: Run) -> bool:
    # При равном произведении выигрывает меньший start, затем меньший end
    if candidate.product > best.product:
        return True
    return candidate.product == best.product and (candidate.start, candidate.end) < (
        best.start,
        best.end,
    )


def find_max_product_run(values: Sequence[Any], domain: RealDomain = FLOAT_DOMAIN) -> Run:
    """Сжатие + свёртка: Run с максимальным произведением для вещественных."""
    runs = compress_runs(values, domain)
    best = reduce_runs(runs)
    _logger.debug(
        "reduced %d runs, best product %r at [%d, %d]",
        len(runs),
        best.product,
        best.start,
        best.end,
    )
    return best


def max_product_real(values: Sequence[Any], domain: RealDomain = FLOAT_DOMAIN) -> IndexRange:
    """
    Диапазон индексов с максимальным произведением (неотрицательные вещественные).

    Args:
        values: Непустая последовательность неотрицательных вещественных
        domain: Числовой домен (FLOAT_DOMAIN, FRACTION_DOMAIN, DECIMAL_DOMAIN, ...)

    Returns:
        IndexRange(start, end), включительно

    Raises:
        EmptySequenceError: Если последовательность пустая

    Examples:
        >>> max_product_real([0.1, 0.5, 13.0, 2.0, 0.1, 4.0, 6.0, 7.0, 8.0, 0.1, 0.2]).as_tuple()
        (2, 8)
    """
    return find_max_product_run(values, domain).span()
