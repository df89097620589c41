"""
Тесты для числовых доменов (capability-интерфейсы)

Проверяет:
1. Сравнение с единицей для RealDomain
2. Проверку на ноль для UnsignedDomain
3. Валидацию элементов
4. Stock-домены для float, Fraction, Decimal, int
"""

import dataclasses
from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.domain.numeric import (
    DECIMAL_DOMAIN,
    FLOAT_DOMAIN,
    FRACTION_DOMAIN,
    UNSIGNED_DOMAIN,
    RealDomain,
    UnsignedDomain,
)


class TestRealDomain:
    """Неотрицательные вещественные."""

    @pytest.mark.parametrize(
        "value, below, above",
        [
            (0.0, True, False),
            (0.999, True, False),
            (1.0, False, False),
            (1.001, False, True),
        ],
    )
    def test_comparison_with_one(self, value, below, above):
        assert FLOAT_DOMAIN.is_below_one(value) is below
        assert FLOAT_DOMAIN.is_above_one(value) is above

    def test_fraction_domain(self):
        assert FRACTION_DOMAIN.is_below_one(Fraction(2, 3))
        assert FRACTION_DOMAIN.is_above_one(Fraction(4, 3))
        assert FRACTION_DOMAIN.one == 1

    def test_decimal_domain(self):
        assert DECIMAL_DOMAIN.is_below_one(Decimal("0.99"))
        assert not DECIMAL_DOMAIN.is_below_one(Decimal("1.00"))

    def test_validate_accepts_non_negative(self):
        FLOAT_DOMAIN.validate(0.0)
        FLOAT_DOMAIN.validate(3)
        FRACTION_DOMAIN.validate(Fraction(1, 7))
        DECIMAL_DOMAIN.validate(Decimal("2.5"))

    @pytest.mark.parametrize(
        "bad", [-0.1, float("nan"), float("inf"), Decimal("NaN"), Fraction(-1, 2), "1.0", None]
    )
    def test_validate_rejects(self, bad):
        with pytest.raises(ValueError):
            FLOAT_DOMAIN.validate(bad, name="values[0]")

    def test_custom_domain(self):
        """Домен с пользовательской единицей."""
        domain = RealDomain(name="percent", zero=0, one=100)

        assert domain.is_below_one(50)
        assert domain.is_above_one(150)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FLOAT_DOMAIN.one = 2.0  # type: ignore[misc]


class TestUnsignedDomain:
    """Беззнаковые целые."""

    def test_is_zero(self):
        assert UNSIGNED_DOMAIN.is_zero(0)
        assert not UNSIGNED_DOMAIN.is_zero(3)

    def test_validate_accepts(self):
        UNSIGNED_DOMAIN.validate(0)
        UNSIGNED_DOMAIN.validate(10**40)

    @pytest.mark.parametrize("bad", [-1, 1.0, True, False, "2", None, Fraction(1, 2)])
    def test_validate_rejects(self, bad):
        with pytest.raises(ValueError):
            UNSIGNED_DOMAIN.validate(bad)

    def test_custom_domain(self):
        domain = UnsignedDomain(name="u8")

        assert domain.zero == 0
        assert domain.one == 1
