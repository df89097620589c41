"""
Demo — демонстрационный прогон быстрого алгоритма для вещественных

Печатает входную последовательность, найденный диапазон и произведение,
пересчитанное по диапазону напрямую:

    F = [0.767..., 0.893..., ...]
    F[0 .. 0] = 0.893...
"""

import logging
import sys
from collections.abc import Sequence
from typing import Final, TextIO

from src.core.domain.numeric import FLOAT_DOMAIN
from src.core.math.products import range_product
from src.max_product.solver import MaxProductConfig, MaxProductSolver

# Все элементы < 1, поэтому ответ - один наибольший элемент
DEMO_VALUES: Final[tuple[float, ...]] = (
    0.7677789417518834,
    0.8933695534913264,
    0.3914341615624717,
    0.7672288709480366,
    0.20364132732776996,
)


def render_demo(values: Sequence[float] = DEMO_VALUES, stream: TextIO | None = None) -> None:
    """
    Прогон MaxProductSolver.solve_real и вывод результата.

    Args:
        values: Непустая последовательность неотрицательных вещественных
        stream: Поток вывода (default: sys.stdout)
    """
    out = stream if stream is not None else sys.stdout
    solver = MaxProductSolver(MaxProductConfig(verify_product=True))

    result = solver.solve_real(values)
    product = range_product(values, result.start, result.end, FLOAT_DOMAIN.one)

    out.write(f"F = {list(values)}\n")
    out.write(f"F[{result.start} .. {result.end}] = {product}\n")
    out.flush()


def main() -> int:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    render_demo()
    return 0
