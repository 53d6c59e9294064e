"""
Тесты для Tangent Addition — рекуррентность (n, x)

Проверяемые инварианты:
1. Ветка x·y == 1 -> n += 1, x = 0
2. Ветка t >= 0 -> x = t
3. Ветка t < 0 -> n += 1, x = -1/t
4. Полный оборот <=> n == 4, x == 0
5. Частичные суммы не проходят проверку
6. Детерминизм (чистая функция)
"""

from fractions import Fraction

import pytest

from atansquare.core.errors import AngleMismatch
from atansquare.core.math.tangent_addition import (
    QUARTER_TURNS_PER_TURN,
    AtanSum,
    check_atan_sum,
    tangent_addition_sum,
    verify_tangent_addition,
)

HALF = Fraction(1, 2)
THIRD = Fraction(1, 3)


# =============================================================================
# ТЕСТЫ: AtanSum.add
# =============================================================================


class TestAtanSumAdd:
    """Тесты ветвей AtanSum.add."""

    def test_initial_state(self):
        """Начальное состояние (0, 0)."""
        total = AtanSum()
        assert total.n == 0
        assert total.x == 0

    def test_add_to_zero(self):
        """atan(0) + atan(y): t = y."""
        total = AtanSum()
        total.add(HALF)
        assert total.n == 0
        assert total.x == HALF

    def test_non_negative_branch(self):
        """atan(1/2) + atan(1/3) = π/4: x = 1."""
        total = AtanSum()
        total.add(HALF)
        total.add(THIRD)
        assert total.n == 0
        assert total.x == 1

    def test_residual_may_exceed_one(self):
        """atan(1/2) + atan(1/2) < π/2, но x = 4/3 > 1."""
        total = AtanSum()
        total.add(HALF)
        total.add(HALF)
        assert total.n == 0
        assert total.x == Fraction(4, 3)

    def test_product_one_branch(self):
        """x·y == 1: ровно π/2."""
        total = AtanSum(n=0, x=Fraction(3))
        total.add(THIRD)
        assert total.n == 1
        assert total.x == 0

    def test_negative_branch(self):
        """atan(3) + atan(1/2) = π/2 + atan(1/7)."""
        total = AtanSum(n=0, x=Fraction(3))
        total.add(HALF)
        assert total.n == 1
        assert total.x == Fraction(1, 7)

    def test_add_zero_is_identity(self):
        """atan(0) ничего не меняет."""
        total = AtanSum(n=2, x=Fraction(5, 7))
        total.add(Fraction(0))
        assert total.n == 2
        assert total.x == Fraction(5, 7)

    def test_negative_tangent_rejected(self):
        """Отрицательный tan вне домена."""
        with pytest.raises(ValueError, match="non-negative"):
            AtanSum().add(Fraction(-1, 2))

    def test_residual_stays_non_negative(self):
        """x >= 0 после каждого шага."""
        total = AtanSum()
        for y in [Fraction(9, 10), Fraction(7, 8), Fraction(1, 5), Fraction(99, 100)] * 5:
            total.add(y)
            assert total.x >= 0


# =============================================================================
# ТЕСТЫ: Full turn
# =============================================================================


class TestFullTurn:
    """Тесты вердикта полного оборота."""

    def test_sixteen_terms_sum_to_full_turn(self):
        """8 пар (1/2, 1/3) = 8·π/4 = 2π."""
        total = tangent_addition_sum([HALF, THIRD] * 8)
        assert total.n == QUARTER_TURNS_PER_TURN
        assert total.x == 0
        assert total.is_full_turn()

    def test_eight_terms_sum_to_half_turn(self):
        """4 пары (1/2, 1/3) = π, не 2π."""
        total = tangent_addition_sum([HALF, THIRD] * 4)
        assert total.n == 2
        assert total.x == 0
        assert not total.is_full_turn()

    def test_partial_sum_does_not_pass(self):
        """atan(1/2) + atan(1/3) без остальных членов — не оборот."""
        total = tangent_addition_sum([HALF, THIRD])
        assert (total.n, total.x) == (0, 1)
        with pytest.raises(AngleMismatch):
            check_atan_sum(total)

    def test_four_ones_end_at_two_quarters(self):
        """4 × atan(1) = π: (0,1) -> (1,0) -> (1,1) -> (2,0)."""
        ones = [Fraction(1)] * 4
        states = []
        total = AtanSum()
        for y in ones:
            total.add(y)
            states.append((total.n, total.x))
        assert states == [(0, 1), (1, 0), (1, 1), (2, 0)]

        with pytest.raises(AngleMismatch, match="2·π/2"):
            verify_tangent_addition(ones, line_label="row 0")

    def test_all_zero_line_fails(self):
        """Линия из нулей: сумма 0, n остаётся 0."""
        total = tangent_addition_sum([Fraction(0)] * 16)
        assert total.n == 0
        with pytest.raises(AngleMismatch):
            check_atan_sum(total)

    def test_two_full_turns_fail(self):
        """16 пар = 4π: n == 8."""
        total = tangent_addition_sum([HALF, THIRD] * 16)
        assert total.n == 8
        assert total.x == 0
        assert not total.is_full_turn()

    def test_order_independent_final_sum(self):
        """Итоговая сумма не зависит от порядка членов."""
        forward = tangent_addition_sum([HALF] * 8 + [THIRD] * 8)
        interleaved = tangent_addition_sum([HALF, THIRD] * 8)
        assert (forward.n, forward.x) == (interleaved.n, interleaved.x) == (4, 0)

    def test_error_carries_line_label(self):
        """AngleMismatch содержит имя линии."""
        with pytest.raises(AngleMismatch) as exc_info:
            verify_tangent_addition([HALF], line_label="column 7")
        assert exc_info.value.line_label == "column 7"
        assert str(exc_info.value).startswith("column 7:")

    def test_deterministic(self):
        """Повторный запуск даёт тот же результат."""
        values = [Fraction(9, 10), Fraction(1, 7), Fraction(2, 9)] * 3
        first = tangent_addition_sum(values)
        second = tangent_addition_sum(values)
        assert (first.n, first.x) == (second.n, second.x)
