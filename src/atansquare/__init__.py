"""
atansquare — точный верификатор "арктангенсного" магического квадрата.

Каждая клетка сетки S×S — правильная дробь tan(θ), θ ∈ [0, π/2).
Сумма углов вдоль каждой строки, столбца и обеих диагоналей должна быть
ровно 2π; вычисления только в точной рациональной/целочисленной арифметике.
"""

__version__ = "0.1.0"
