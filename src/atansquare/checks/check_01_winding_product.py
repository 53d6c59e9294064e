"""CHECK 1: Сумма углов линии методом произведения (winding product)

Независимая проверка суммы углов линии: произведение гауссовых целых
d + n·i должно быть положительным вещественным числом, без перескока
IV -> I квадрант на каком-либо шаге.

Интеграция:
- Использует результат CHECK 0 (должен быть PASS)
- Аккумулятор локален для одной линии
"""

from dataclasses import dataclass
from typing import Optional

from atansquare.checks.check_00_number_inventory import Check00Result
from atansquare.core.domain.grid import Grid
from atansquare.core.domain.lines import Line
from atansquare.core.errors import AngleMismatch
from atansquare.core.math.winding_product import GaussianInteger, check_winding_trace, winding_product


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Check01Result:
    """Результат CHECK 1."""

    passed: bool
    block_reason: str
    line_label: str

    # Итоговое произведение (None если проверка заблокирована)
    product: Optional[GaussianInteger]
    overrun_step: Optional[int]
    error: Optional[AngleMismatch]

    # Детали
    details: str


# =============================================================================
# CHECK 1
# =============================================================================


class Check01WindingProduct:
    """CHECK 1: Winding product.

    Порядок проверок:
    1. CHECK 0 блокировка (должен быть PASS)
    2. Свёртка линии произведением и проверка перескока/знака
    """

    def evaluate(self, check00_result: Check00Result, grid: Grid, line: Line) -> Check01Result:
        """Оценка CHECK 1 для одной линии.

        Args:
            check00_result: результат CHECK 0
            grid: сетка
            line: проверяемая линия

        Returns:
            Check01Result с вердиктом
        """
        if not check00_result.passed:
            return Check01Result(
                passed=False,
                block_reason=f"check00_blocked: {check00_result.block_reason}",
                line_label=line.label,
                product=None,
                overrun_step=None,
                error=None,
                details=f"CHECK 0 blocked: {check00_result.details}",
            )

        trace = winding_product(grid.fractions_along(line))

        try:
            product = check_winding_trace(trace, line_label=line.label)
        except AngleMismatch as e:
            return Check01Result(
                passed=False,
                block_reason=e.code,
                line_label=line.label,
                product=trace.product,
                overrun_step=trace.overrun_step,
                error=e,
                details=str(e),
            )

        return Check01Result(
            passed=True,
            block_reason="",
            line_label=line.label,
            product=product,
            overrun_step=None,
            error=None,
            details=f"PASS: {line.label} product = {product}",
        )
