"""
Modulo — остаток от деления fixed-point чисел

modulo(a, b) = a - b * (a / b), где a / b — целое частное, усечённое
divide (scale = 0) к нулю. В записи a - b * floor(a / b) floor означает
именно это усекающее деление, а не округление к минус бесконечности:
-7 mod 2 == -1, а не 1. Остаток наследует знак делимого; тождество
a == b * (a / b) + modulo(a, b) выполняется точно.

Остаток не берётся из цикла Algorithm D: деление его не сохраняет.
"""

import logging

from arbitraire.core.domain.fixed_point import FixedPointNumber, validate_scale
from arbitraire.core.math.arithmetic import multiply, subtract
from arbitraire.core.math.division import DEFAULT_BASE, divide
from arbitraire.core.math.scratch import DigitAllocator

logger = logging.getLogger(__name__)


def modulo(
    a: FixedPointNumber,
    b: FixedPointNumber,
    base: int = DEFAULT_BASE,
    scale: int = 0,
    allocator: DigitAllocator | None = None,
) -> FixedPointNumber:
    """
    Остаток a - b * trunc(a / b).

    Args:
        a: Делимое
        b: Делитель
        base: Radix
        scale: Минимальное число дробных цифр результата
        allocator: Аллокатор scratch-буферов деления

    Returns:
        Остаток с max(scale, frac(a), frac(b)) дробными цифрами

    Raises:
        DivideByZero: Если b равен нулю

    Examples:
        >>> str(modulo(FixedPointNumber.from_string("7.5"), FixedPointNumber.from_string("2")))
        '1.5'
        >>> str(modulo(FixedPointNumber.from_string("-7"), FixedPointNumber.from_string("2")))
        '-1'
    """
    validate_scale(scale)

    quotient = divide(a, b, base, 0, allocator)
    remainder = subtract(a, multiply(b, quotient, base), base)

    logger.debug(
        "modulo: quotient_length=%d remainder_length=%d remainder_negative=%s",
        quotient.length,
        remainder.length,
        remainder.is_negative(),
    )

    return remainder.rescale(max(scale, remainder.fractional_digits))
