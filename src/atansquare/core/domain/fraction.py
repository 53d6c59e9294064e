"""
ProperFraction — клетка сетки

Immutable Pydantic модель дроби numerator/denominator, интерпретируемой как
tan(θ) угла первой четверти.

Модель сознательно допускает несокращённые и неправильные дроби (а также
numerator = 0): эти нарушения обнаруживает и именует NumberInventory check,
а не парсер. Отрицательные значения и нулевой знаменатель отвергаются сразу.
"""

import math
import re
from fractions import Fraction
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

# Формат токена: "<digits>/<digits>" (только ASCII 0-9), без знака и пробелов
TOKEN_PATTERN: Final[re.Pattern] = re.compile(r"^([0-9]+)/([0-9]+)$")

# Плейсхолдер нераспознанного числа (так помечает клетки OCR-этап)
UNREADABLE_PLACEHOLDER: Final[str] = "?"


# =============================================================================
# PROPER FRACTION MODEL
# =============================================================================


class ProperFraction(BaseModel):
    """
    Дробь numerator/denominator клетки сетки.

    Immutable модель (frozen=True). Для валидной сетки каждая клетка
    удовлетворяет gcd(numerator, denominator) == 1 и numerator < denominator,
    то есть представляет tan(θ) для θ ∈ [0, π/2).
    """

    numerator: int = Field(..., ge=0, description="Числитель (tan = numerator/denominator)")
    denominator: int = Field(..., ge=1, description="Знаменатель")

    model_config = {"frozen": True}

    @classmethod
    def from_token(cls, token: str) -> "ProperFraction":
        """
        Разбор токена "<numerator>/<denominator>".

        Raises:
            ValueError: если токен не соответствует формату
        """
        match = TOKEN_PATTERN.match(token)
        if match is None:
            raise ValueError(f"malformed fraction token {token!r}")
        return cls(numerator=int(match.group(1)), denominator=int(match.group(2)))

    @property
    def value(self) -> Fraction:
        """Точное рациональное значение tan(θ)."""
        return Fraction(self.numerator, self.denominator)

    @property
    def is_reduced(self) -> bool:
        return math.gcd(self.numerator, self.denominator) == 1

    @property
    def is_proper(self) -> bool:
        return self.numerator < self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
