"""CHECK 2: Сумма углов линии по формуле сложения тангенсов

Основная (авторитетная) проверка суммы углов: чисто рациональная
рекуррентность над (n, x), итог должен быть ровно (4, 0).

Интеграция:
- Использует результат CHECK 0 (должен быть PASS)
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from atansquare.checks.check_00_number_inventory import Check00Result
from atansquare.core.domain.grid import Grid
from atansquare.core.domain.lines import Line
from atansquare.core.errors import AngleMismatch
from atansquare.core.math.tangent_addition import check_atan_sum, tangent_addition_sum


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Check02Result:
    """Результат CHECK 2."""

    passed: bool
    block_reason: str
    line_label: str

    # Итоговое состояние суммы (None если проверка заблокирована)
    quarter_turns: Optional[int]
    residual: Optional[Fraction]
    error: Optional[AngleMismatch]

    # Детали
    details: str


# =============================================================================
# CHECK 2
# =============================================================================


class Check02TangentAddition:
    """CHECK 2: Tangent addition."""

    def evaluate(self, check00_result: Check00Result, grid: Grid, line: Line) -> Check02Result:
        """Оценка CHECK 2 для одной линии.

        Args:
            check00_result: результат CHECK 0
            grid: сетка
            line: проверяемая линия

        Returns:
            Check02Result с вердиктом
        """
        if not check00_result.passed:
            return Check02Result(
                passed=False,
                block_reason=f"check00_blocked: {check00_result.block_reason}",
                line_label=line.label,
                quarter_turns=None,
                residual=None,
                error=None,
                details=f"CHECK 0 blocked: {check00_result.details}",
            )

        total = tangent_addition_sum(grid.fractions_along(line))

        try:
            check_atan_sum(total, line_label=line.label)
        except AngleMismatch as e:
            return Check02Result(
                passed=False,
                block_reason=e.code,
                line_label=line.label,
                quarter_turns=total.n,
                residual=total.x,
                error=e,
                details=str(e),
            )

        return Check02Result(
            passed=True,
            block_reason="",
            line_label=line.label,
            quarter_turns=total.n,
            residual=total.x,
            error=None,
            details=f"PASS: {line.label} angle sum = {total}",
        )
