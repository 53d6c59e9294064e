"""Checks — индивидуальные проверки верификатора.

- CHECK 0: Инвентарь чисел (несократимые правильные дроби, перестановка 1..2·S²)
- CHECK 1: Winding product (произведение гауссовых целых)
- CHECK 2: Tangent addition (рекуррентность (n, x))
- CHECK 3: Cross-validation вердиктов CHECK 1 и CHECK 2
"""

from .check_00_number_inventory import Check00NumberInventory, Check00Result, check_number_inventory
from .check_01_winding_product import Check01Result, Check01WindingProduct
from .check_02_tangent_addition import Check02Result, Check02TangentAddition
from .check_03_cross_validation import Check03CrossValidation, Check03Result

__all__ = [
    "Check00NumberInventory",
    "Check00Result",
    "check_number_inventory",
    "Check01WindingProduct",
    "Check01Result",
    "Check02TangentAddition",
    "Check02Result",
    "Check03CrossValidation",
    "Check03Result",
]
