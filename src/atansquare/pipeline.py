"""
VerificationPipeline — оркестрация проверок

Порядок:
1. Разбор текста в Grid (ParseError фатален, частичной сетки нет)
2. CHECK 0: инвентарь чисел (InvariantViolation фатален, линии не проверяются)
3. Для каждой из 2S+2 линий: CHECK 1 (winding product), CHECK 2 (tangent
   addition), CHECK 3 (cross-validation)

Режимы:
- fail_fast=True: остановка после первой провалившейся линии
- fail_fast=False: проверяются все линии, нарушения агрегируются

Каждый запуск — чистая функция входа: аккумуляторы локальны для линии,
общего изменяемого состояния нет.
"""

import logging
from typing import Optional

from atansquare.checks import (
    Check00NumberInventory,
    Check01WindingProduct,
    Check02TangentAddition,
    Check03CrossValidation,
)
from atansquare.config import VerifierConfig
from atansquare.core.domain.grid import Grid, parse_grid
from atansquare.core.domain.lines import enumerate_lines
from atansquare.core.errors import ParseError
from atansquare.report import LineVerdict, VerificationReport

_LOGGER = logging.getLogger(__name__)


class VerificationPipeline:
    """Пайплайн проверок одной сетки."""

    def __init__(self, config: Optional[VerifierConfig] = None):
        """
        Args:
            config: конфигурация (опционально, используется default: S = 16, strict)
        """
        self.config = config or VerifierConfig()
        self._check00 = Check00NumberInventory()
        self._check01 = Check01WindingProduct()
        self._check02 = Check02TangentAddition()
        self._check03 = Check03CrossValidation()

    def run_text(self, text: str) -> VerificationReport:
        """Разбор текста и запуск всех проверок.

        Raises:
            ParseError: некорректный входной текст
        """
        grid = parse_grid(text, self.config.grid_size)
        _LOGGER.debug("Parsed %dx%d grid", grid.size, grid.size)
        return self.run(grid)

    def run(self, grid: Grid) -> VerificationReport:
        """Запуск всех проверок для готовой сетки.

        Args:
            grid: сетка размера config.grid_size

        Returns:
            VerificationReport (в strict режиме — до первой провалившейся линии)

        Raises:
            ParseError: размер сетки не совпадает с config.grid_size
        """
        if grid.size != self.config.grid_size:
            raise ParseError(
                f"grid is {grid.size}x{grid.size}, configured size is {self.config.grid_size}"
            )

        inventory = self._check00.evaluate(grid)
        if not inventory.passed:
            _LOGGER.warning("Number inventory failed: %s", inventory.details)
            return VerificationReport(
                grid_size=grid.size,
                fail_fast=self.config.fail_fast,
                inventory=inventory,
                lines=(),
            )
        _LOGGER.debug(inventory.details)

        verdicts: list[LineVerdict] = []

        for line in enumerate_lines(grid.size):
            winding = self._check01.evaluate(inventory, grid, line)
            tangent = self._check02.evaluate(inventory, grid, line)
            cross = (
                self._check03.evaluate(winding, tangent, line)
                if self.config.cross_validate
                else None
            )
            verdict = LineVerdict(line=line, winding=winding, tangent=tangent, cross_validation=cross)
            verdicts.append(verdict)

            if verdict.passed:
                _LOGGER.debug("%s: %s", line.label, tangent.details)
                continue

            for error in verdict.errors:
                _LOGGER.warning("%s", error)

            if self.config.fail_fast:
                break

        report = VerificationReport(
            grid_size=grid.size,
            fail_fast=self.config.fail_fast,
            inventory=inventory,
            lines=tuple(verdicts),
        )

        if report.passed:
            _LOGGER.info("All %d lines sum to exactly 2π", len(verdicts))
        else:
            _LOGGER.info("%d of %d checked lines failed", len(report.failed_lines), len(verdicts))

        return report

    def verify(self, grid: Grid) -> VerificationReport:
        """Как run(), но провал оформляется исключением.

        Raises:
            InvariantViolation | AngleMismatch | WindingOverrun | VerifierDisagreement:
                первое обнаруженное нарушение
        """
        report = self.run(grid)
        if not report.passed:
            raise report.errors[0]
        return report

    def verify_text(self, text: str) -> VerificationReport:
        """Как run_text(), но провал оформляется исключением."""
        grid = parse_grid(text, self.config.grid_size)
        return self.verify(grid)
