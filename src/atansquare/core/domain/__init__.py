"""
Domain models and value objects.

Contains ProperFraction, Grid (with its text parser), and line descriptors.
"""

from atansquare.core.domain.fraction import (
    TOKEN_PATTERN,
    UNREADABLE_PLACEHOLDER,
    ProperFraction,
)
from atansquare.core.domain.grid import Grid, parse_grid
from atansquare.core.domain.lines import Line, LineKind, enumerate_lines

__all__ = [
    # Fraction
    "TOKEN_PATTERN",
    "UNREADABLE_PLACEHOLDER",
    "ProperFraction",
    # Grid
    "Grid",
    "parse_grid",
    # Lines
    "Line",
    "LineKind",
    "enumerate_lines",
]
