"""
Errors — таксономия ошибок верификатора

Все ошибки терминальны для текущего запуска: верификатор не сервис,
retry и degraded mode отсутствуют.

Иерархия:
- VerificationError
  - ParseError           : некорректный входной текст (токен, число строк/столбцов)
  - InvariantViolation   : несокращённая/неправильная дробь, нарушение диапазона чисел
  - AngleMismatch        : сумма углов линии != 2π
    - WindingOverrun     : двойной оборот за один шаг произведения
  - VerifierDisagreement : два независимых алгоритма разошлись во мнении
"""

from typing import Optional


class VerificationError(Exception):
    """Базовый класс всех ошибок верификации."""

    # Короткий машиночитаемый код (используется в block_reason и отчёте)
    code: str = "verification_error"


class ParseError(VerificationError):
    """
    Некорректный входной текст.

    Attributes:
        line_no: номер строки входа (1-based) или None для ошибок формы
        token: проблемный токен или None
    """

    code = "parse_error"

    def __init__(self, message: str, line_no: Optional[int] = None, token: Optional[str] = None):
        self.line_no = line_no
        self.token = token
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class InvariantViolation(VerificationError):
    """
    Нарушение инварианта нумерации.

    Attributes:
        cell: координаты (row, col) проблемной клетки или None для глобального инварианта
    """

    code = "invariant_violation"

    def __init__(self, message: str, cell: Optional[tuple[int, int]] = None):
        self.cell = cell
        super().__init__(message)


class AngleMismatch(VerificationError):
    """
    Сумма углов линии не равна ровно одному полному обороту.

    Attributes:
        line_label: человекочитаемое имя линии ("row 3", "main diagonal", ...)
    """

    code = "angle_mismatch"

    def __init__(self, message: str, line_label: str = ""):
        self.line_label = line_label
        if line_label:
            message = f"{line_label}: {message}"
        super().__init__(message)


class WindingOverrun(AngleMismatch):
    """
    Произведение перескочило из IV квадранта в I за один шаг.

    Знаковая проверка итогового произведения для такой линии недостоверна.

    Attributes:
        step: индекс элемента линии (0-based), на котором обнаружен перескок
    """

    code = "winding_overrun"

    def __init__(self, message: str, line_label: str = "", step: Optional[int] = None):
        self.step = step
        super().__init__(message, line_label=line_label)


class VerifierDisagreement(VerificationError):
    """Winding product и tangent addition дали разные вердикты для одной линии."""

    code = "verifier_disagreement"

    def __init__(self, message: str, line_label: str = ""):
        self.line_label = line_label
        if line_label:
            message = f"{line_label}: {message}"
        super().__init__(message)
