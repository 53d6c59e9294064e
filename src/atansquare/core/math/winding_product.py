"""
Winding Product — проверка суммы углов через произведение гауссовых целых

Дробь n/d отображается в комплексное число d + n·i, аргумент которого
равен atan(n/d). Умножение комплексных чисел складывает аргументы точно,
поэтому сумма углов линии равна 2π·k тогда и только тогда, когда итоговое
произведение — положительное вещественное число.

Знаковая проверка не отличает k = 1 от k = 0 или k = 2, поэтому на каждом
шаге проверяется переход квадрантов: каждый угол лежит в [0, π/2), и если
аргумент до умножения был в (3π/2, 2π), а после оказался в (0, π/2), то
накопленный угол перешагнул полный оборот.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только целочисленная арифметика (int произвольной точности), без float
2. Аккумулятор создаётся заново для каждой линии, начальное значение 1 + 0i
3. Порядок обхода линии фиксирован (проверка квадрантов зависит от пути)
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, NamedTuple

from atansquare.core.errors import AngleMismatch, WindingOverrun


# =============================================================================
# GAUSSIAN INTEGER
# =============================================================================


@dataclass(frozen=True)
class GaussianInteger:
    """Точное комплексное число re + im·i с целыми компонентами."""

    re: int
    im: int

    @classmethod
    def one(cls) -> "GaussianInteger":
        return cls(1, 0)

    @classmethod
    def from_tangent(cls, value: Fraction) -> "GaussianInteger":
        """
        tan(θ) = n/d  ->  d + n·i (arg = atan(n/d)).

        Fraction всегда нормализована со знаменателем > 0, поэтому для
        value >= 0 результат лежит в замкнутом I квадранте.
        """
        return cls(value.denominator, value.numerator)

    def __mul__(self, other: "GaussianInteger") -> "GaussianInteger":
        return GaussianInteger(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    @property
    def in_open_quadrant_1(self) -> bool:
        """Аргумент в (0, π/2)."""
        return self.re > 0 and self.im > 0

    @property
    def in_open_quadrant_4(self) -> bool:
        """Аргумент в (3π/2, 2π)."""
        return self.re > 0 and self.im < 0

    @property
    def is_positive_real(self) -> bool:
        """Аргумент ≡ 0 (mod 2π)."""
        return self.re > 0 and self.im == 0

    def __str__(self) -> str:
        sign = "+" if self.im >= 0 else "-"
        return f"{self.re} {sign} {abs(self.im)}i"


# =============================================================================
# WINDING PRODUCT
# =============================================================================


class WindingTrace(NamedTuple):
    """Результат свёртки линии произведением."""

    product: GaussianInteger
    overrun_step: int | None  # индекс шага с двойным оборотом, None если не было
    visited_quadrant_4: bool  # было ли хоть одно промежуточное произведение в (3π/2, 2π)


def winding_product(values: Iterable[Fraction]) -> WindingTrace:
    """
    Произведение d + n·i по всем значениям линии с контролем перехода IV -> I.

    Свёртка не прерывается на перескоке: фиксируется первый такой шаг.

    Сумма ровно 2π из углов < π/2 обязана пройти через (3π/2, 2π) перед
    последним ненулевым шагом, поэтому visited_quadrant_4 отличает 2π от 0.

    Args:
        values: tan(θ) элементов линии в порядке обхода (каждое >= 0)

    Returns:
        WindingTrace(product, overrun_step, visited_quadrant_4)

    Raises:
        ValueError: если значение отрицательно (угол вне [0, π/2))
    """
    product = GaussianInteger.one()
    overrun_step: int | None = None
    visited_quadrant_4 = False

    for step, value in enumerate(values):
        if value < 0:
            raise ValueError(f"tangent must be non-negative, got {value}")

        before_q4 = product.in_open_quadrant_4
        product = product * GaussianInteger.from_tangent(value)
        after_q1 = product.in_open_quadrant_1

        if before_q4 and after_q1 and overrun_step is None:
            overrun_step = step

        if product.in_open_quadrant_4:
            visited_quadrant_4 = True

    return WindingTrace(product, overrun_step, visited_quadrant_4)


def check_winding_trace(trace: WindingTrace, line_label: str = "") -> GaussianInteger:
    """
    Вердикт по готовой свёртке: сумма углов равна ровно 2π.

    Args:
        trace: результат winding_product()
        line_label: имя линии для сообщений об ошибках

    Returns:
        Итоговое произведение (положительное вещественное)

    Raises:
        WindingOverrun: аргумент перешагнул полный оборот за один шаг
        AngleMismatch: итоговое произведение не положительное вещественное
            или линия не совершила ни одного оборота
    """
    if trace.overrun_step is not None:
        raise WindingOverrun(
            f"accumulated angle wrapped past a full turn at step {trace.overrun_step}",
            line_label=line_label,
            step=trace.overrun_step,
        )

    if not trace.product.is_positive_real:
        raise AngleMismatch(
            f"angle sum is not 2π: product {trace.product} is not a positive real",
            line_label=line_label,
        )

    if not trace.visited_quadrant_4:
        raise AngleMismatch(
            "angle sum is 0, not 2π: product never entered quadrant IV",
            line_label=line_label,
        )

    return trace.product


def verify_winding_product(values: Iterable[Fraction], line_label: str = "") -> GaussianInteger:
    """Проверка, что сумма углов линии равна ровно 2π (метод произведения)."""
    return check_winding_trace(winding_product(values), line_label=line_label)
