"""
Numeric Domains — явные числовые capability-интерфейсы

Алгоритмы не опираются на «ambient» перегрузку операторов и не гадают,
какой тип им передан: каждый вызов получает объект домена, который знает
нулевой и единичный элементы своего типа и умеет валидировать элементы.

- RealDomain: неотрицательные вещественные (float, Fraction, Decimal).
  Сравнение с мультипликативной единицей: ниже единицы / выше единицы.
- UnsignedDomain: беззнаковые целые. Проверка на аддитивный ноль.
"""

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any

from src.core.math.numerical_safeguards import (
    validate_non_negative,
    validate_unsigned_integer,
)


# =============================================================================
# REAL DOMAIN
# =============================================================================


@dataclass(frozen=True)
class RealDomain:
    """Домен неотрицательных вещественных чисел.

    Значения < one уменьшают бегущее произведение, значения > one — увеличивают.
    Ровно one произведение не меняет.
    """

    name: str
    zero: Any = 0.0
    one: Any = 1.0

    def is_below_one(self, value: Any) -> bool:
        return value < self.one

    def is_above_one(self, value: Any) -> bool:
        return value > self.one

    def validate(self, value: Any, name: str = "value") -> None:
        """Проверка элемента: конечный и неотрицательный.

        Raises:
            ValueError: Если элемент NaN/Inf или отрицательный
        """
        validate_non_negative(value, name)


# =============================================================================
# UNSIGNED DOMAIN
# =============================================================================


@dataclass(frozen=True)
class UnsignedDomain:
    """Домен беззнаковых целых.

    Ноль «убивает» любое произведение, поэтому сканер никогда не
    перемножает через нулевой элемент.
    """

    name: str
    zero: Any = 0
    one: Any = 1

    def is_zero(self, value: Any) -> bool:
        return value == self.zero

    def validate(self, value: Any, name: str = "value") -> None:
        """Проверка элемента: целое, не bool, >= 0.

        Raises:
            ValueError: Если элемент не является беззнаковым целым
        """
        validate_unsigned_integer(value, name)


# =============================================================================
# STOCK DOMAINS
# =============================================================================

FLOAT_DOMAIN = RealDomain(name="float", zero=0.0, one=1.0)
FRACTION_DOMAIN = RealDomain(name="fraction", zero=Fraction(0), one=Fraction(1))
DECIMAL_DOMAIN = RealDomain(name="decimal", zero=Decimal(0), one=Decimal(1))

UNSIGNED_DOMAIN = UnsignedDomain(name="unsigned", zero=0, one=1)
