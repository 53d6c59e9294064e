"""CHECK 0: Инвентарь чисел сетки

Проверяет инвариант нумерации до любых проверок линий:
- каждая клетка — несократимая правильная дробь (gcd == 1, numerator < denominator)
- все числители и знаменатели вместе образуют перестановку 1..2·S²

Нарушение фатально: проверки линий не запускаются.
"""

import math
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from atansquare.config import NUMBER_MIN, number_max_for
from atansquare.core.domain.grid import Grid
from atansquare.core.errors import InvariantViolation


# Сколько значений перечислять в сообщении об ошибке
_MAX_LISTED_VALUES = 10


def _format_values(values: list[int]) -> str:
    shown = ", ".join(str(v) for v in values[:_MAX_LISTED_VALUES])
    if len(values) > _MAX_LISTED_VALUES:
        shown += f", ... ({len(values)} total)"
    return f"[{shown}]"


def check_number_inventory(grid: Grid) -> list[int]:
    """
    Проверка инварианта нумерации.

    Args:
        grid: разобранная сетка S×S

    Returns:
        Отсортированный инвентарь чисел (== [1, ..., 2·S²])

    Raises:
        InvariantViolation: несократимость/правильность клетки или
            пропущенные/повторённые/внедиапазонные числа
    """
    numbers: list[int] = []

    for (r, c), fraction in grid.cells():
        if not fraction.is_reduced:
            raise InvariantViolation(
                f"cell ({r}, {c}) holds {fraction}, which is not reduced "
                f"(gcd = {math.gcd(fraction.numerator, fraction.denominator)})",
                cell=(r, c),
            )
        if not fraction.is_proper:
            raise InvariantViolation(
                f"cell ({r}, {c}) holds {fraction}, which is not proper (numerator >= denominator)",
                cell=(r, c),
            )
        numbers.append(fraction.numerator)
        numbers.append(fraction.denominator)

    numbers.sort()
    number_max = number_max_for(grid.size)
    expected = list(range(NUMBER_MIN, number_max + 1))

    if numbers != expected:
        counts = Counter(numbers)
        problems: list[str] = []

        out_of_range = sorted(v for v in counts if v < NUMBER_MIN or v > number_max)
        if out_of_range:
            problems.append(f"out of range {NUMBER_MIN}..{number_max}: {_format_values(out_of_range)}")

        duplicates = sorted(v for v, k in counts.items() if k > 1)
        if duplicates:
            problems.append(f"duplicated: {_format_values(duplicates)}")

        missing = [v for v in expected if v not in counts]
        if missing:
            problems.append(f"missing: {_format_values(missing)}")

        raise InvariantViolation(
            f"numerators and denominators are not a permutation of "
            f"{NUMBER_MIN}..{number_max}; " + "; ".join(problems)
        )

    return numbers


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Check00Result:
    """Результат CHECK 0."""

    passed: bool
    block_reason: str

    # Клетка-нарушитель (None для глобального инварианта или PASS)
    cell: Optional[tuple[int, int]]
    error: Optional[InvariantViolation]

    # Детали
    details: str


# =============================================================================
# CHECK 0
# =============================================================================


class Check00NumberInventory:
    """CHECK 0: Инвентарь чисел.

    Stateless: чистая функция сетки.
    """

    def evaluate(self, grid: Grid) -> Check00Result:
        """Оценка CHECK 0: несократимость, правильность, перестановка 1..2·S².

        Args:
            grid: разобранная сетка

        Returns:
            Check00Result с вердиктом
        """
        try:
            numbers = check_number_inventory(grid)
        except InvariantViolation as e:
            return Check00Result(
                passed=False,
                block_reason=e.code,
                cell=e.cell,
                error=e,
                details=str(e),
            )

        return Check00Result(
            passed=True,
            block_reason="",
            cell=None,
            error=None,
            details=f"PASS: {len(numbers)} numbers form {NUMBER_MIN}..{numbers[-1]}",
        )
