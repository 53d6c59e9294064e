"""
CLI — проверка сетки из файла или stdin

Коды выхода:
    0  все инварианты выполнены для всех линий
    1  нарушение инварианта (InvariantViolation, AngleMismatch, ...)
    2  некорректный вход (ParseError, не UTF-8) или ошибка ввода/вывода
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from atansquare.config import DEFAULT_GRID_SIZE, VerifierConfig
from atansquare.core.contracts import report_validator
from atansquare.core.errors import ParseError
from atansquare.pipeline import VerificationPipeline

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="atansquare",
        description="Exact check that every row, column and diagonal of a grid of "
        "tangents sums to one full turn.",
    )
    ap.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Grid file: S lines of S 'numerator/denominator' tokens ('-' for stdin).",
    )
    ap.add_argument(
        "--size",
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f"Grid size S (default: {DEFAULT_GRID_SIZE}, numbers 1..2*S^2).",
    )
    ap.add_argument(
        "--aggregate",
        action="store_true",
        help="Check every line and report all failures instead of stopping at the first.",
    )
    ap.add_argument(
        "--no-cross-validate",
        action="store_true",
        help="Do not report disagreements between the two verifiers separately.",
    )
    ap.add_argument("--report-json", type=Path, help="Write the JSON verification report here.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every checked line.")
    return ap


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    try:
        config = VerifierConfig(
            grid_size=args.size,
            fail_fast=not args.aggregate,
            cross_validate=not args.no_cross_validate,
        )
    except ValidationError as e:
        print(f"invalid configuration: {e.errors()[0]['msg']}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"cannot read input: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    pipeline = VerificationPipeline(config)

    try:
        report = pipeline.run_text(text)
    except ParseError as e:
        print("FAIL")
        print(f"parse error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.report_json is not None:
        data = report.to_dict()
        violations = report_validator().violations(data)
        if violations:
            for violation in violations:
                _LOGGER.error("report contract: %s", violation)
            raise RuntimeError("verification report violates its JSON contract")
        args.report_json.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        _LOGGER.debug("Report written to %s", args.report_json)

    if not report.passed:
        print("FAIL")
        for error in report.errors:
            print(f"{error.code}: {error}", file=sys.stderr)
        return EXIT_FAILED

    print("PASS")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
