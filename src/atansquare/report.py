"""
VerificationReport — итог одного запуска верификатора

Immutable снапшот результатов всех проверок и его JSON-представление
(контракт verification_report.json).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from atansquare.checks import Check00Result, Check01Result, Check02Result, Check03Result
from atansquare.config import number_max_for
from atansquare.core.domain.lines import Line
from atansquare.core.errors import VerificationError


# =============================================================================
# LINE VERDICT
# =============================================================================


@dataclass(frozen=True)
class LineVerdict:
    """Вердикты всех проверок для одной линии."""

    line: Line
    winding: Check01Result
    tangent: Check02Result
    cross_validation: Optional[Check03Result]  # None если сверка отключена

    @property
    def passed(self) -> bool:
        if self.cross_validation is not None and not self.cross_validation.passed:
            return False
        return self.winding.passed and self.tangent.passed

    @property
    def errors(self) -> list[VerificationError]:
        """Ошибки линии: сверка, затем tangent addition, затем winding product."""
        errors: list[VerificationError] = []
        if self.cross_validation is not None and self.cross_validation.error is not None:
            errors.append(self.cross_validation.error)
        if self.tangent.error is not None:
            errors.append(self.tangent.error)
        if self.winding.error is not None:
            errors.append(self.winding.error)
        return errors

    def to_dict(self) -> Dict[str, Any]:
        product = self.winding.product
        residual = self.tangent.residual
        cross = self.cross_validation
        return {
            "kind": self.line.kind.value,
            "index": self.line.index,
            "label": self.line.label,
            "passed": self.passed,
            "winding": {
                "passed": self.winding.passed,
                "block_reason": self.winding.block_reason,
                "product": None if product is None else {"re": str(product.re), "im": str(product.im)},
                "overrun_step": self.winding.overrun_step,
            },
            "tangent": {
                "passed": self.tangent.passed,
                "block_reason": self.tangent.block_reason,
                "quarter_turns": self.tangent.quarter_turns,
                "residual": None if residual is None else str(residual),
            },
            "cross_validation": None if cross is None else {
                "passed": cross.passed,
                "block_reason": cross.block_reason,
            },
        }


# =============================================================================
# REPORT
# =============================================================================


@dataclass(frozen=True)
class VerificationReport:
    """
    Итог запуска.

    passed == True только если CHECK 0 прошёл и все 2S+2 линии прошли
    все проверки. При провале CHECK 0 линии не проверяются (lines пуст).
    """

    grid_size: int
    fail_fast: bool
    inventory: Check00Result
    lines: tuple[LineVerdict, ...]

    @property
    def passed(self) -> bool:
        return self.inventory.passed and bool(self.lines) and all(v.passed for v in self.lines)

    @property
    def number_max(self) -> int:
        return number_max_for(self.grid_size)

    @property
    def errors(self) -> list[VerificationError]:
        """Все обнаруженные нарушения в порядке проверки."""
        if self.inventory.error is not None:
            return [self.inventory.error]
        errors: list[VerificationError] = []
        for verdict in self.lines:
            errors.extend(verdict.errors)
        return errors

    @property
    def failed_lines(self) -> list[LineVerdict]:
        return [v for v in self.lines if not v.passed]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-представление (контракт verification_report.json)."""
        return {
            "schema_version": "1",
            "grid_size": self.grid_size,
            "number_max": self.number_max,
            "mode": "strict" if self.fail_fast else "aggregate",
            "passed": self.passed,
            "inventory": {
                "passed": self.inventory.passed,
                "block_reason": self.inventory.block_reason,
                "cell": None if self.inventory.cell is None else list(self.inventory.cell),
                "details": self.inventory.details,
            },
            "lines": [v.to_dict() for v in self.lines],
            "failures": [
                {
                    "code": e.code,
                    "line": getattr(e, "line_label", None) or None,
                    "message": str(e),
                }
                for e in self.errors
            ],
        }
