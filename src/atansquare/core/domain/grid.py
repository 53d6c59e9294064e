"""
Grid — квадратная сетка дробей и её парсер

Immutable Pydantic модель сетки S×S и разбор входного текста:
ровно S строк по S токенов "<numerator>/<denominator>", разделённых пробелами.

Парсер не производит частичную сетку: любая ошибка формата -> ParseError
с номером строки и токеном.
"""

from fractions import Fraction
from typing import Iterator

from pydantic import BaseModel, Field, ValidationError, field_validator

from atansquare.core.domain.fraction import UNREADABLE_PLACEHOLDER, ProperFraction
from atansquare.core.domain.lines import Line
from atansquare.core.errors import ParseError


# =============================================================================
# GRID MODEL
# =============================================================================


class Grid(BaseModel):
    """
    Сетка S×S дробей (read-only после разбора).

    Immutable модель (frozen=True); rows[r][c] — клетка строки r, столбца c.
    """

    rows: tuple[tuple[ProperFraction, ...], ...] = Field(
        ..., min_length=1, description="Строки сетки"
    )

    model_config = {"frozen": True}

    @field_validator("rows")
    @classmethod
    def validate_square(
        cls, v: tuple[tuple[ProperFraction, ...], ...]
    ) -> tuple[tuple[ProperFraction, ...], ...]:
        """Все строки должны иметь длину S = число строк."""
        size = len(v)
        for r, row in enumerate(v):
            if len(row) != size:
                raise ValueError(f"grid is not square: row {r} has {len(row)} cells, expected {size}")
        return v

    @property
    def size(self) -> int:
        return len(self.rows)

    def cell(self, row: int, col: int) -> ProperFraction:
        return self.rows[row][col]

    def cells(self) -> Iterator[tuple[tuple[int, int], ProperFraction]]:
        """Обход клеток в row-major порядке с координатами."""
        for r, row in enumerate(self.rows):
            for c, fraction in enumerate(row):
                yield (r, c), fraction

    def fractions_along(self, line: Line) -> list[Fraction]:
        """Точные значения tan(θ) вдоль линии в порядке её обхода."""
        return [self.rows[r][c].value for r, c in line.coordinates]

    def cells_along(self, line: Line) -> list[ProperFraction]:
        return [self.rows[r][c] for r, c in line.coordinates]


# =============================================================================
# PARSER
# =============================================================================


def _parse_token(token: str, line_no: int) -> ProperFraction:
    """Разбор одного токена с переводом ошибок в ParseError."""
    if UNREADABLE_PLACEHOLDER in token:
        raise ParseError(f"unreadable number in token {token!r}", line_no=line_no, token=token)

    if "/" not in token:
        raise ParseError(f"token {token!r} lacks '/' separator", line_no=line_no, token=token)

    try:
        return ProperFraction.from_token(token)
    except ValidationError as e:
        # Валидный по форме токен, но denominator == 0
        raise ParseError(
            f"invalid fraction {token!r}: {e.errors()[0]['msg']}", line_no=line_no, token=token
        ) from e
    except ValueError as e:
        raise ParseError(
            f"token {token!r} is not '<integer>/<integer>'", line_no=line_no, token=token
        ) from e


def parse_grid(text: str, size: int) -> Grid:
    """
    Разбор входного текста в сетку S×S.

    Завершающие пустые строки игнорируются; пустая строка внутри сетки —
    ошибка числа токенов.

    Args:
        text: входной текст
        size: ожидаемый размер сетки S

    Returns:
        Grid размера size×size

    Raises:
        ParseError: неверное число токенов в строке, токен без '/',
            нецелая компонента, нулевой знаменатель, неверное число строк
    """
    raw_lines = text.splitlines()
    while raw_lines and not raw_lines[-1].strip():
        raw_lines.pop()

    rows: list[tuple[ProperFraction, ...]] = []

    for line_no, raw in enumerate(raw_lines, start=1):
        tokens = raw.split()
        if len(tokens) != size:
            raise ParseError(
                f"expected {size} tokens, got {len(tokens)}", line_no=line_no
            )
        rows.append(tuple(_parse_token(token, line_no) for token in tokens))

    if len(rows) != size:
        raise ParseError(f"expected {size} lines, got {len(rows)}")

    return Grid(rows=tuple(rows))
