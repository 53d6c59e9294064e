"""Тесты для CHECK 0: Number Inventory

Покрытие:
- Несократимость и правильность каждой клетки (с координатами)
- Перестановка 1..2·S² (пропуски, повторы, выход за диапазон)
- Результат gate-style объекта
"""

import pytest

from atansquare.checks import Check00NumberInventory, Check00Result, check_number_inventory
from atansquare.core.domain.grid import parse_grid
from atansquare.core.errors import InvariantViolation


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def check00():
    """CHECK 0 instance."""
    return Check00NumberInventory()


@pytest.fixture
def valid_grid():
    """2×2 сетка с числами 1..8."""
    return parse_grid("1/8 3/4\n5/6 2/7", 2)


# =============================================================================
# ТЕСТЫ: check_number_inventory
# =============================================================================


class TestCheckNumberInventory:
    """Тесты чистой функции инвентаря."""

    def test_valid_inventory(self, valid_grid):
        assert check_number_inventory(valid_grid) == list(range(1, 9))

    def test_single_cell(self):
        assert check_number_inventory(parse_grid("1/2", 1)) == [1, 2]

    def test_non_reduced_cell(self):
        grid = parse_grid("1/8 3/5\n4/6 2/7", 2)
        with pytest.raises(InvariantViolation, match=r"cell \(1, 0\).*4/6.*not reduced") as exc_info:
            check_number_inventory(grid)
        assert exc_info.value.cell == (1, 0)

    def test_improper_cell(self):
        grid = parse_grid("1/8 4/3\n5/6 2/7", 2)
        with pytest.raises(InvariantViolation, match="not proper") as exc_info:
            check_number_inventory(grid)
        assert exc_info.value.cell == (0, 1)

    def test_zero_numerator_is_out_of_range(self):
        """0/1 несократима и правильна, но 0 вне диапазона."""
        grid = parse_grid("0/1 3/4\n5/6 2/7", 2)
        with pytest.raises(InvariantViolation, match=r"out of range 1\.\.8: \[0\]") as exc_info:
            check_number_inventory(grid)
        assert exc_info.value.cell is None

    def test_duplicate_value(self):
        grid = parse_grid("1/8 3/4\n5/6 3/7", 2)
        with pytest.raises(InvariantViolation, match=r"duplicated: \[3\].*missing: \[2\]"):
            check_number_inventory(grid)

    def test_value_above_range(self):
        grid = parse_grid("1/9 3/4\n5/6 2/7", 2)
        with pytest.raises(InvariantViolation, match=r"out of range 1\.\.8: \[9\].*missing: \[8\]"):
            check_number_inventory(grid)

    def test_long_lists_are_truncated(self):
        """Все клетки 1/2 при S = 4: длинный список пропусков сокращается."""
        grid = parse_grid("\n".join(["1/2 1/2 1/2 1/2"] * 4), 4)
        with pytest.raises(InvariantViolation, match=r"missing: \[3, 4, .*\(30 total\)"):
            check_number_inventory(grid)

    def test_cell_checks_run_before_range(self):
        """Клетка-нарушитель именуется раньше глобального инварианта."""
        grid = parse_grid("2/4 2/4\n2/4 2/4", 2)
        with pytest.raises(InvariantViolation) as exc_info:
            check_number_inventory(grid)
        assert exc_info.value.cell == (0, 0)


# =============================================================================
# ТЕСТЫ: Check00NumberInventory
# =============================================================================


class TestCheck00NumberInventory:
    """Тесты gate-style объекта CHECK 0."""

    def test_pass(self, check00, valid_grid):
        result = check00.evaluate(valid_grid)
        assert isinstance(result, Check00Result)
        assert result.passed is True
        assert result.block_reason == ""
        assert result.error is None
        assert "1..8" in result.details

    def test_fail(self, check00):
        result = check00.evaluate(parse_grid("1/8 8/3\n5/6 2/7", 2))
        assert result.passed is False
        assert result.block_reason == "invariant_violation"
        assert result.cell == (0, 1)
        assert isinstance(result.error, InvariantViolation)
        assert "not proper" in result.details

    def test_idempotent(self, check00, valid_grid):
        assert check00.evaluate(valid_grid) == check00.evaluate(valid_grid)
