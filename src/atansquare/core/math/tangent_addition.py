"""
Tangent Addition — проверка суммы углов по формуле сложения тангенсов

Сумма углов хранится как n·(π/2) + atan(x), где n — число четвертей
оборота, x — точный рациональный остаток.

ФОРМУЛЫ:
    A = atan(x), B = atan(y), 0 <= A < π/2, 0 <= B < π/2
    x·y == 1           ->  A + B == π/2:             n += 1, x = 0
    t = (x+y)/(1-x·y)  ->  tan(A + B)
    t >= 0             ->  0 <= A + B < π/2:         x = t
    t < 0              ->  π/2 < A + B < π:          n += 1, x = -1/t
                           (tan(A + B - π/2) = -1/tan(A + B))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. n >= 0, x >= 0 (0 <= atan(x) < π/2) после каждого шага
2. Только операции +, -, ×, ÷ над Fraction и сравнения, без float
3. Полный оборот <=> n == 4 и x == 0
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Final, Iterable

from atansquare.core.errors import AngleMismatch


# =============================================================================
# CONSTANTS
# =============================================================================

# Число четвертей в полном обороте (2π = 4 · π/2)
QUARTER_TURNS_PER_TURN: Final[int] = 4


# =============================================================================
# ATAN SUM
# =============================================================================


@dataclass
class AtanSum:
    """Накопленная сумма углов n·(π/2) + atan(x)."""

    n: int = 0
    x: Fraction = field(default_factory=Fraction)

    def add(self, y: Fraction) -> None:
        """
        Прибавить atan(y) к сумме.

        Args:
            y: tan(θ) очередного элемента (>= 0)

        Raises:
            ValueError: если y < 0
        """
        if y < 0:
            raise ValueError(f"tangent must be non-negative, got {y}")

        prod = self.x * y

        if prod == 1:
            self.n += 1
            self.x = Fraction(0)
            return

        tan_add = (self.x + y) / (1 - prod)

        if tan_add < 0:
            self.n += 1
            self.x = -1 / tan_add
        else:
            self.x = tan_add

    def is_full_turn(self) -> bool:
        """Сумма равна ровно 2π."""
        return self.n == QUARTER_TURNS_PER_TURN and self.x == 0

    def __str__(self) -> str:
        return f"{self.n}·π/2 + atan({self.x})"


def tangent_addition_sum(values: Iterable[Fraction]) -> AtanSum:
    """Свёртка значений линии слева направо в AtanSum."""
    total = AtanSum()
    for y in values:
        total.add(y)
    return total


def verify_tangent_addition(values: Iterable[Fraction], line_label: str = "") -> AtanSum:
    """Проверка, что сумма углов линии равна ровно 2π (метод сложения тангенсов)."""
    return check_atan_sum(tangent_addition_sum(values), line_label=line_label)


def check_atan_sum(total: AtanSum, line_label: str = "") -> AtanSum:
    """
    Вердикт по готовой сумме.

    Args:
        total: результат tangent_addition_sum()
        line_label: имя линии для сообщений об ошибках

    Returns:
        Та же AtanSum (n == 4, x == 0)

    Raises:
        AngleMismatch: итоговая сумма не равна 2π
    """
    if not total.is_full_turn():
        raise AngleMismatch(
            f"angle sum is {total}, expected {QUARTER_TURNS_PER_TURN}·π/2 + atan(0)",
            line_label=line_label,
        )

    return total
