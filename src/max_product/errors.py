"""
Исключения алгоритмов максимального произведения.

Типизированной таксономии восстанавливаемых ошибок нет: пустая
последовательность и невалидный элемент — ошибки вызывающего кода.
"""


class MaxProductError(Exception):
    """Базовое исключение пакета max_product."""
    pass


class EmptySequenceError(MaxProductError, ValueError):
    """
    Пустая входная последовательность.

    Результат для пустой последовательности не определён: нет ни одного
    допустимого диапазона индексов.
    """
    pass


class InvalidElementError(MaxProductError, ValueError):
    """Элемент последовательности не принадлежит домену (отрицательный, NaN, не целое)."""

    def __init__(self, index: int, value: object, reason: str):
        self.index = index
        self.value = value
        super().__init__(f"Invalid element at index {index}: {reason}")


class ProductMismatchError(MaxProductError):
    """
    Агрегат алгоритма не совпал с прямым пересчётом произведения по диапазону.

    Возникает только при MaxProductConfig.verify_product=True.
    """
    pass


class ProductOverflowError(MaxProductError, OverflowError):
    """
    Произведение найденного диапазона не представимо конечным float.

    Диапазон найден корректно: точный агрегат (Fraction, Decimal) доступен
    через find_max_product_run, не помещается только поле product результата.
    """

    def __init__(self, start: int, end: int, product: object):
        self.start = start
        self.end = end
        self.product = product
        super().__init__(
            f"product of range [{start}, {end}] does not fit a finite float; "
            f"use find_max_product_run for the exact value"
        )
