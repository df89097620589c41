"""
MaxProductResult — результат поиска подпоследовательности с максимальным произведением

Immutable Pydantic модель, возвращаемая MaxProductSolver.
Соответствует схеме src/core/contracts/schema/max_product_result.json.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.domain.segment import IndexRange


# =============================================================================
# ENUMS
# =============================================================================


class Algorithm(str, Enum):
    """Алгоритм, которым получен результат"""

    ZERO_SEGMENTED = "zero_segmented"
    STACK_REDUCTION = "stack_reduction"


# =============================================================================
# RESULT MODEL
# =============================================================================


class MaxProductResult(BaseModel):
    """
    Результат поиска.

    Immutable модель (frozen=True). product — агрегат, вычисленный алгоритмом
    (для float может отличаться от прямого пересчёта в пределах округления).
    """

    algorithm: Algorithm = Field(..., description="Использованный алгоритм")
    start: int = Field(..., ge=0, description="Первый индекс диапазона")
    end: int = Field(..., ge=0, description="Последний индекс диапазона (включительно)")
    product: int | float = Field(..., description="Произведение элементов диапазона (>= 0)")
    sequence_length: int = Field(..., gt=0, description="Длина входной последовательности")
    run_count: Optional[int] = Field(
        None, ge=1, description="Количество run'ов после сжатия (только для вещественных)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_range(self) -> "MaxProductResult":
        if self.start > self.end:
            raise ValueError(f"start {self.start} must be <= end {self.end}")
        if self.product < 0:
            raise ValueError(f"product must be non-negative, got {self.product}")
        if self.end >= self.sequence_length:
            raise ValueError(
                f"end {self.end} out of bounds for sequence_length {self.sequence_length}"
            )
        return self

    @property
    def index_range(self) -> IndexRange:
        return IndexRange(start=self.start, end=self.end)

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в JSON-контракт max_product_result.

        Returns:
            dict, готовый для validate_max_product_result / json.dumps
        """
        return self.model_dump(mode="json")
