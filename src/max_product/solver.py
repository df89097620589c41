"""MaxProductSolver: фасад над быстрыми алгоритмами

Объединяет валидацию входа, вызов алгоритма и (опционально) проверку
агрегата прямым пересчётом произведения по найденному диапазону.

- solve_unsigned: Zero-Segmented Scanner (беззнаковые целые)
- solve_real: Segment Compressor + Stack Reducer (неотрицательные вещественные)

Порядок обработки:
1. Пустая последовательность → EmptySequenceError
2. Валидация элементов доменом (если включена) → InvalidElementError
3. Быстрый алгоритм
4. Проверка агрегата (если включена) → ProductMismatchError
5. Приведение произведения к float (solve_real) → ProductOverflowError
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.core.domain.numeric import (
    FLOAT_DOMAIN,
    UNSIGNED_DOMAIN,
    RealDomain,
    UnsignedDomain,
)
from src.core.domain.result import Algorithm, MaxProductResult
from src.core.domain.segment import Run
from src.core.math.numerical_safeguards import EPS_PRODUCT_REL
from src.core.math.products import products_match, range_product
from src.max_product.compressor import compress_runs
from src.max_product.errors import (
    EmptySequenceError,
    InvalidElementError,
    ProductMismatchError,
    ProductOverflowError,
)
from src.max_product.stack_reducer import reduce_runs
from src.max_product.zero_scanner import scan_zero_free_runs

_logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MaxProductConfig:
    """Конфигурация MaxProductSolver."""

    # Проверять каждый элемент доменом (неотрицательность, NaN/Inf, целочисленность)
    validate_inputs: bool = True

    # Пересчитывать произведение по найденному диапазону и сверять с агрегатом
    verify_product: bool = False

    # Относительная толерантность сверки для вещественных
    product_rel_tol: float = EPS_PRODUCT_REL


# =============================================================================
# SOLVER
# =============================================================================


class MaxProductSolver:
    """Поиск непрерывного диапазона с максимальным произведением.

    Stateless: один экземпляр можно переиспользовать для любого числа вызовов.
    """

    def __init__(self, config: MaxProductConfig | None = None):
        """Инициализация солвера.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or MaxProductConfig()

    def solve_unsigned(
        self,
        values: Sequence[Any],
        domain: UnsignedDomain = UNSIGNED_DOMAIN,
    ) -> MaxProductResult:
        """Максимальное произведение для беззнаковых целых.

        Args:
            values: непустая последовательность беззнаковых целых
            domain: числовой домен

        Returns:
            MaxProductResult с algorithm=ZERO_SEGMENTED

        Raises:
            EmptySequenceError: пустая последовательность
            InvalidElementError: элемент не является беззнаковым целым
            ProductMismatchError: агрегат не совпал с пересчётом (verify_product)
        """
        self._check_non_empty(values)
        if self.config.validate_inputs:
            self._validate_elements(values, domain)

        best = scan_zero_free_runs(values, domain)

        if self.config.verify_product:
            self._verify(values, best, domain.one)

        _logger.debug(
            "zero-segmented scan: n=%d best=[%d, %d]", len(values), best.start, best.end
        )

        return MaxProductResult(
            algorithm=Algorithm.ZERO_SEGMENTED,
            start=best.start,
            end=best.end,
            product=int(best.product),
            sequence_length=len(values),
        )

    def solve_real(
        self,
        values: Sequence[Any],
        domain: RealDomain = FLOAT_DOMAIN,
    ) -> MaxProductResult:
        """Максимальное произведение для неотрицательных вещественных.

        Args:
            values: непустая последовательность неотрицательных вещественных
            domain: числовой домен (float, Fraction, Decimal)

        Returns:
            MaxProductResult с algorithm=STACK_REDUCTION; product приведён к float

        Raises:
            EmptySequenceError: пустая последовательность
            InvalidElementError: отрицательный элемент или NaN/Inf
            ProductMismatchError: агрегат не совпал с пересчётом (verify_product)
            ProductOverflowError: произведение не помещается в конечный float
        """
        self._check_non_empty(values)
        if self.config.validate_inputs:
            self._validate_elements(values, domain)

        runs = compress_runs(values, domain)
        best = reduce_runs(runs)

        if self.config.verify_product:
            self._verify(values, best, domain.one)

        _logger.debug(
            "stack reduction: n=%d runs=%d best=[%d, %d]",
            len(values),
            len(runs),
            best.start,
            best.end,
        )

        return MaxProductResult(
            algorithm=Algorithm.STACK_REDUCTION,
            start=best.start,
            end=best.end,
            product=self._float_product(best),
            sequence_length=len(values),
            run_count=len(runs),
        )

    # -------------------------------------------------------------------------
    # helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_non_empty(values: Sequence[Any]) -> None:
        if len(values) == 0:
            raise EmptySequenceError("max product of an empty sequence is undefined")

    @staticmethod
    def _validate_elements(values: Sequence[Any], domain: RealDomain | UnsignedDomain) -> None:
        for i, value in enumerate(values):
            try:
                domain.validate(value, name=f"values[{i}]")
            except ValueError as e:
                raise InvalidElementError(i, value, str(e)) from e

    def _verify(self, values: Sequence[Any], best: Run, one: Any) -> None:
        recomputed = range_product(values, best.start, best.end, one)
        if not products_match(best.product, recomputed, rel_tol=self.config.product_rel_tol):
            raise ProductMismatchError(
                f"aggregate product {best.product!r} for [{best.start}, {best.end}] "
                f"does not match recomputed product {recomputed!r}"
            )

    @staticmethod
    def _float_product(best: Run) -> float:
        # float(Fraction) переполняется исключением, float(Decimal) и float*float дают inf
        try:
            product = float(best.product)
        except OverflowError as e:
            raise ProductOverflowError(best.start, best.end, best.product) from e
        if not math.isfinite(product):
            raise ProductOverflowError(best.start, best.end, best.product)
        return product
