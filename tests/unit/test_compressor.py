"""
Тесты для Segment Compressor (вещественные)

Проверяемые инварианты:
1. Список run'ов никогда не пустой
2. Последовательность целиком из элементов < 1 → один синтетический run
3. Run'ы чередуются и начинаются/заканчиваются растущим run'ом
4. Завершающий участок «ниже единицы» отбрасывается
5. Произведение run'а совпадает с прямым пересчётом по его границам
6. Хвостовые единицы растущего run'а отрезаются, ведущие — сохраняются
"""

import random
from fractions import Fraction

import pytest

from src.core.domain.numeric import FRACTION_DOMAIN
from src.core.domain.segment import Run
from src.core.math.numerical_safeguards import is_close
from src.core.math.products import range_product
from src.max_product.compressor import compress_runs
from src.max_product.errors import EmptySequenceError


# =============================================================================
# ТЕСТЫ: Ведущие элементы < 1
# =============================================================================


class TestLeadingBelowOne:
    """Вся последовательность ниже единицы."""

    def test_all_below_one_returns_single_max(self):
        """Возвращается один run с наибольшим элементом."""
        assert compress_runs([0.2, 0.7, 0.5]) == [Run(0.7, 1, 1)]

    def test_first_maximum_wins(self):
        """Равные максимумы: берётся первый (строгое `>`)."""
        assert compress_runs([0.3, 0.9, 0.9]) == [Run(0.9, 1, 1)]

    def test_all_zeros(self):
        """Только нули → run (0, 0, 0)."""
        assert compress_runs([0.0, 0.0]) == [Run(0.0, 0, 0)]

    def test_single_element_below_one(self):
        assert compress_runs([0.4]) == [Run(0.4, 0, 0)]

    def test_leading_prefix_is_skipped(self):
        """Ведущие элементы < 1 не попадают в run'ы, если дальше есть рост."""
        runs = compress_runs([0.9, 0.8, 3.0])

        assert runs == [Run(3.0, 2, 2)]


# =============================================================================
# ТЕСТЫ: Чередование
# =============================================================================


class TestAlternation:
    """Разбиение на чередующиеся run'ы."""

    def test_basic_alternation(self):
        """[0.5, 2, 3, 0.5, 4] → рост, спад, рост."""
        runs = compress_runs([0.5, 2.0, 3.0, 0.5, 4.0])

        assert runs == [Run(6.0, 1, 2), Run(0.5, 3, 3), Run(4.0, 4, 4)]

    def test_trailing_below_one_run_dropped(self):
        """Завершающий участок «ниже единицы» отбрасывается."""
        runs = compress_runs([2.0, 0.5, 0.25])

        assert runs == [Run(2.0, 0, 0)]

    def test_below_run_product_accumulates(self):
        """Произведение участка «ниже единицы» накапливается."""
        runs = compress_runs([4.0, 0.5, 0.5, 8.0])

        assert runs == [Run(4.0, 0, 0), Run(0.25, 1, 2), Run(8.0, 3, 3)]

    def test_reference_sequence(self):
        """Сценарий с двумя растущими участками."""
        values = [0.1, 0.5, 13.0, 2.0, 0.1, 4.0, 6.0, 7.0, 8.0, 0.1, 0.2]
        runs = compress_runs(values)

        assert [(r.start, r.end) for r in runs] == [(2, 3), (4, 4), (5, 8)]
        assert runs[0].product == 26.0
        assert runs[2].product == 1344.0

    @pytest.mark.parametrize("seed", range(25))
    def test_structure_on_random_input(self, seed):
        """Нечётная длина, упорядоченные смежные границы, точные агрегаты."""
        rng = random.Random(seed)
        values = [rng.uniform(0.0, 2.0) for _ in range(rng.randint(1, 80))]

        runs = compress_runs(values)

        assert runs
        assert len(runs) % 2 == 1
        for prev, nxt in zip(runs, runs[1:]):
            assert prev.end + 1 == nxt.start
        for run in runs:
            assert run.start <= run.end
            assert is_close(run.product, range_product(values, run.start, run.end, 1.0))

    def test_input_not_mutated(self):
        values = [0.5, 2.0, 0.5, 3.0]
        snapshot = list(values)

        compress_runs(values)

        assert values == snapshot


# =============================================================================
# ТЕСТЫ: Ровно единица
# =============================================================================


class TestExactOnes:
    """Единица не меняет произведение: размещение по порядку эталона."""

    def test_trailing_ones_trimmed(self):
        """Хвостовые единицы не продлевают растущий run."""
        assert compress_runs([2.0, 1.0, 1.0]) == [Run(2.0, 0, 0)]

    def test_leading_ones_kept(self):
        """Ведущие единицы входят в растущий run."""
        assert compress_runs([0.5, 1.0, 3.0]) == [Run(3.0, 1, 2)]

    def test_only_ones_after_prefix(self):
        """Run из одних единиц сохраняется (список не пустой)."""
        assert compress_runs([0.5, 1.0]) == [Run(1.0, 1, 1)]

    def test_trimmed_ones_join_next_below_run(self):
        """Отрезанные единицы переходят в следующий участок «ниже единицы»."""
        runs = compress_runs([2.0, 1.0, 0.5, 3.0])

        assert runs == [Run(2.0, 0, 0), Run(0.5, 1, 2), Run(3.0, 3, 3)]

    def test_first_element_exactly_one(self):
        """Первый элемент ровно 1 открывает растущий run."""
        assert compress_runs([1.0, 2.0]) == [Run(2.0, 0, 1)]


# =============================================================================
# ТЕСТЫ: Домены и ошибки
# =============================================================================


class TestDomainsAndErrors:
    """Другие числовые домены, пустой вход."""

    def test_fraction_domain_exact(self):
        """Fraction: агрегаты точные."""
        values = [Fraction(1, 2), Fraction(3), Fraction(1, 3), Fraction(4)]
        runs = compress_runs(values, FRACTION_DOMAIN)

        assert runs == [
            Run(Fraction(3), 1, 1),
            Run(Fraction(1, 3), 2, 2),
            Run(Fraction(4), 3, 3),
        ]

    def test_empty_sequence_raises(self):
        with pytest.raises(EmptySequenceError):
            compress_runs([])
