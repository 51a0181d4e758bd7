"""
arbitraire — arbitrary-precision fixed-point arithmetic

Точная десятичная (и не только) арифметика с фиксированной точкой:
- FixedPointNumber: неизменяемое представление числа в произвольном radix
- divide: длинное деление по Algorithm D (Knuth), усечение до scale цифр
- modulo: остаток по тождеству a - b * (a / b)
- ArithmeticEngine: фасад с конфигурацией radix/scale по умолчанию
"""

import logging

from arbitraire.core.domain import FixedPointNumber, Sign
from arbitraire.core.exceptions import AllocationFailure, ArbitraireError, DivideByZero
from arbitraire.core.math import (
    DEFAULT_BASE,
    DivisionResult,
    DivisionStats,
    add,
    divide,
    divide_with_stats,
    modulo,
    multiply,
    subtract,
)
from arbitraire.engine import ArithmeticEngine, EngineConfig

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Domain
    "FixedPointNumber",
    "Sign",
    # Exceptions
    "ArbitraireError",
    "DivideByZero",
    "AllocationFailure",
    # Operations
    "DEFAULT_BASE",
    "DivisionResult",
    "DivisionStats",
    "add",
    "divide",
    "divide_with_stats",
    "modulo",
    "multiply",
    "subtract",
    # Engine
    "ArithmeticEngine",
    "EngineConfig",
]
