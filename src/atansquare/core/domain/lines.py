"""
Lines — перечисление проверяемых линий сетки

Для сетки S×S проверяются ровно 2S+2 линии:
- S строк (row r: (r, 0..S-1), столбцы по возрастанию)
- S столбцов (column c: (0..S-1, c), строки по возрастанию)
- главная диагональ ((i, i), i = 0..S-1)
- побочная диагональ ((i, S-1-i), i = 0..S-1)

Порядок обхода внутри линии фиксирован: промежуточные проверки квадрантов
в winding product зависят от пути.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================


class LineKind(str, Enum):
    """Семейство линии."""

    ROW = "row"
    COLUMN = "column"
    MAIN_DIAGONAL = "main_diagonal"
    ANTI_DIAGONAL = "anti_diagonal"


# =============================================================================
# LINE
# =============================================================================


@dataclass(frozen=True)
class Line:
    """Дескриптор линии: последовательность координат (row, col)."""

    kind: LineKind
    index: Optional[int]  # None для диагоналей
    coordinates: tuple[tuple[int, int], ...]

    @property
    def label(self) -> str:
        """Человекочитаемое имя линии для сообщений об ошибках."""
        if self.kind == LineKind.ROW:
            return f"row {self.index}"
        if self.kind == LineKind.COLUMN:
            return f"column {self.index}"
        if self.kind == LineKind.MAIN_DIAGONAL:
            return "main diagonal"
        return "anti-diagonal"

    def __len__(self) -> int:
        return len(self.coordinates)


def enumerate_lines(size: int) -> list[Line]:
    """
    Все 2S+2 линии сетки размера S.

    Args:
        size: размер сетки S (>= 1)

    Returns:
        Строки, затем столбцы, затем главная и побочная диагонали

    Raises:
        ValueError: если size < 1
    """
    if size < 1:
        raise ValueError(f"grid size must be positive, got {size}")

    lines: list[Line] = []

    for r in range(size):
        lines.append(Line(LineKind.ROW, r, tuple((r, c) for c in range(size))))

    for c in range(size):
        lines.append(Line(LineKind.COLUMN, c, tuple((r, c) for r in range(size))))

    lines.append(Line(LineKind.MAIN_DIAGONAL, None, tuple((i, i) for i in range(size))))
    lines.append(
        Line(LineKind.ANTI_DIAGONAL, None, tuple((i, size - 1 - i) for i in range(size)))
    )

    return lines
