"""
Core math modules для atansquare

Точные алгоритмы проверки суммы углов: без float, только int и Fraction.
"""

# Winding Product (гауссовы целые)
from atansquare.core.math.winding_product import (
    GaussianInteger,
    WindingTrace,
    check_winding_trace,
    verify_winding_product,
    winding_product,
)

# Tangent Addition (рекуррентность (n, x))
from atansquare.core.math.tangent_addition import (
    QUARTER_TURNS_PER_TURN,
    AtanSum,
    check_atan_sum,
    tangent_addition_sum,
    verify_tangent_addition,
)

__all__ = [
    # Winding Product
    "GaussianInteger",
    "WindingTrace",
    "check_winding_trace",
    "verify_winding_product",
    "winding_product",
    # Tangent Addition
    "QUARTER_TURNS_PER_TURN",
    "AtanSum",
    "check_atan_sum",
    "tangent_addition_sum",
    "verify_tangent_addition",
]
