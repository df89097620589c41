"""
Segment — run'ы и диапазоны индексов

- IndexRange: включительный непрерывный диапазон (start, end), start <= end.
  Immutable Pydantic модель — это публичный результат алгоритмов.
- Run: (product, start, end) — агрегат непрерывного участка последовательности.
  NamedTuple, потому что run'ы создаются и сворачиваются в горячем цикле.
"""

from typing import Any, NamedTuple

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# INDEX RANGE
# =============================================================================


class IndexRange(BaseModel):
    """
    Включительный диапазон индексов [start, end].

    Immutable модель (frozen=True). Инвариант start <= end проверяется
    при создании.
    """

    start: int = Field(..., ge=0, description="Первый индекс диапазона")
    end: int = Field(..., ge=0, description="Последний индекс диапазона (включительно)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_order(self) -> "IndexRange":
        if self.start > self.end:
            raise ValueError(f"start {self.start} must be <= end {self.end}")
        return self

    @property
    def length(self) -> int:
        """Количество элементов в диапазоне."""
        return self.end - self.start + 1

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


# =============================================================================
# RUN
# =============================================================================


class Run(NamedTuple):
    """
    Сжатый участок последовательности.

    product — произведение элементов участка, [start, end] — его границы.
    Категория участка (ниже единицы / не ниже единицы) не хранится:
    она определяется позицией в чередующемся списке.
    """

    product: Any
    start: int
    end: int

    def span(self) -> IndexRange:
        return IndexRange(start=self.start, end=self.end)
