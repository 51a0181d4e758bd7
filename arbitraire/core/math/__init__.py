"""
Core math modules для arbitraire

Длинное деление по Algorithm D и примитивы над массивами цифр.
"""

# Digit-array primitives
from arbitraire.core.math.digit_arrays import (
    short_multiply,
    windowed_add,
    windowed_subtract,
)

# Scratch buffers
from arbitraire.core.math.scratch import (
    DigitAllocator,
    ScratchArena,
    TrackingAllocator,
    scratch_buffers,
)

# Normalization
from arbitraire.core.math.normalization import normalization_factor, normalize

# Algorithm D
from arbitraire.core.math.algorithm_d import (
    MAX_REFINEMENT_STEPS,
    DivisionStats,
    produce_quotient_digits,
)

# Division
from arbitraire.core.math.division import (
    DEFAULT_BASE,
    DivisionResult,
    QuotientLayout,
    divide,
    divide_with_stats,
    plan_quotient,
)

# Arithmetic collaborators
from arbitraire.core.math.arithmetic import add, multiply, subtract

# Modulo
from arbitraire.core.math.modulo import modulo

__all__ = [
    # Primitives
    "short_multiply",
    "windowed_add",
    "windowed_subtract",
    # Scratch buffers
    "DigitAllocator",
    "ScratchArena",
    "TrackingAllocator",
    "scratch_buffers",
    # Normalization
    "normalization_factor",
    "normalize",
    # Algorithm D
    "MAX_REFINEMENT_STEPS",
    "DivisionStats",
    "produce_quotient_digits",
    # Division
    "DEFAULT_BASE",
    "DivisionResult",
    "QuotientLayout",
    "divide",
    "divide_with_stats",
    "plan_quotient",
    # Arithmetic
    "add",
    "multiply",
    "subtract",
    # Modulo
    "modulo",
]
