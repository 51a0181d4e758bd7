"""Engine — конфигурируемый фасад над операциями arbitraire.

- ArithmeticEngine: разбор, деление, остаток, арифметика
- EngineConfig: radix, scale и аллокатор по умолчанию
"""

from .arithmetic_engine import ArithmeticEngine, EngineConfig, Operand

__all__ = [
    "ArithmeticEngine",
    "EngineConfig",
    "Operand",
]
