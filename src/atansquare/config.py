"""
VerifierConfig — конфигурация запуска верификатора

Immutable Pydantic модель. Размер сетки S — параметр экземпляра головоломки
(эталонный экземпляр: S = 16, числа 1..512), а не константа кода.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# DEFAULTS
# =============================================================================

# Размер эталонного экземпляра
DEFAULT_GRID_SIZE: Final[int] = 16

# Наименьшее число в инвентаре нумерации
NUMBER_MIN: Final[int] = 1


def number_max_for(grid_size: int) -> int:
    """Наибольшее число инвентаря сетки S×S: 2·S² (две позиции на клетку)."""
    return 2 * grid_size * grid_size


# =============================================================================
# CONFIG MODEL
# =============================================================================


class VerifierConfig(BaseModel):
    """
    Конфигурация верификатора.

    fail_fast=True воспроизводит поведение "остановиться на первом нарушении";
    fail_fast=False проверяет все линии и агрегирует все нарушения.
    """

    grid_size: int = Field(DEFAULT_GRID_SIZE, ge=1, description="Размер сетки S")
    fail_fast: bool = Field(True, description="Остановка на первом нарушении")
    cross_validate: bool = Field(
        True, description="Сверять вердикты двух независимых алгоритмов"
    )

    model_config = {"frozen": True}

    @property
    def number_max(self) -> int:
        """Наибольшее число инвентаря: 2·S²."""
        return number_max_for(self.grid_size)
