"""CHECK 3: Сверка вердиктов CHECK 1 и CHECK 2

Winding product и tangent addition — независимые доказательства одного факта.
Расхождение вердиктов для одной линии само по себе дефект и сообщается
отдельно от AngleMismatch.
"""

from dataclasses import dataclass
from typing import Optional

from atansquare.checks.check_01_winding_product import Check01Result
from atansquare.checks.check_02_tangent_addition import Check02Result
from atansquare.core.domain.lines import Line
from atansquare.core.errors import VerifierDisagreement


@dataclass(frozen=True)
class Check03Result:
    """Результат CHECK 3."""

    passed: bool
    block_reason: str
    line_label: str

    winding_passed: bool
    tangent_passed: bool
    error: Optional[VerifierDisagreement]

    details: str


class Check03CrossValidation:
    """CHECK 3: Cross-validation двух алгоритмов."""

    def evaluate(
        self,
        check01_result: Check01Result,
        check02_result: Check02Result,
        line: Line,
    ) -> Check03Result:
        """Оценка CHECK 3: PASS если вердикты совпадают (оба PASS или оба FAIL)."""
        winding_passed = check01_result.passed
        tangent_passed = check02_result.passed

        if winding_passed != tangent_passed:
            error = VerifierDisagreement(
                f"winding product says {'pass' if winding_passed else 'fail'} "
                f"({check01_result.block_reason or 'ok'}), tangent addition says "
                f"{'pass' if tangent_passed else 'fail'} ({check02_result.block_reason or 'ok'})",
                line_label=line.label,
            )
            return Check03Result(
                passed=False,
                block_reason=error.code,
                line_label=line.label,
                winding_passed=winding_passed,
                tangent_passed=tangent_passed,
                error=error,
                details=str(error),
            )

        return Check03Result(
            passed=True,
            block_reason="",
            line_label=line.label,
            winding_passed=winding_passed,
            tangent_passed=tangent_passed,
            error=None,
            details=f"PASS: verifiers agree on {line.label} ({'pass' if winding_passed else 'fail'})",
        )
