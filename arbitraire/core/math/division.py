"""
Division — деление fixed-point чисел с заданным scale

Драйвер длинного деления:
1. DivideByZero для нулевого делителя (ни одного выделения памяти)
2. Раскладка частного: длина целой части, число итераций, out-of-scale
3. Scratch-буферы со slot в [0], ведущие нули делителя отбрасываются
4. Нормализация и Algorithm D
5. Trim ведущих нулей и знак по правилу двух операндов

ФОРМУЛЫ РАСКЛАДКИ:
    lea   = int(num) + frac(den)         — длина делимого слева от scale
    uscal = frac(num) - frac(den)
    leb   = len(den) - ведущие нули      — эффективная длина делителя
    pad   = scale - uscal, если uscal < scale, иначе 0

    leb > lea + scale → out-of-scale, частное = 0 с scale дробными нулями
    иначе: итераций = lea + scale - leb + 1,
           целых цифр = max(lea - leb + 1, 1)

Результат усекается до scale дробных цифр (без округления).
"""

import logging
from dataclasses import dataclass
from typing import Final

from arbitraire.core.domain.fixed_point import (
    FixedPointNumber,
    result_sign,
    validate_base,
    validate_scale,
)
from arbitraire.core.exceptions import DivideByZero
from arbitraire.core.math.algorithm_d import DivisionStats, produce_quotient_digits
from arbitraire.core.math.normalization import normalize
from arbitraire.core.math.scratch import DigitAllocator, scratch_buffers

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEFAULT_BASE: Final[int] = 10


# =============================================================================
# ТИПЫ
# =============================================================================


@dataclass(frozen=True)
class QuotientLayout:
    """Раскладка частного, вычисляемая один раз до цикла."""

    dividend_span: int  # lea
    divisor_length: int  # leb
    divisor_offset: int  # отброшенные ведущие нули делителя
    padding: int  # нули справа от делимого
    integer_digits: int
    scale: int
    iterations: int  # 0 для out-of-scale

    @property
    def out_of_scale(self) -> bool:
        return self.iterations == 0

    @property
    def length(self) -> int:
        return self.integer_digits + self.scale

    @property
    def first_digit(self) -> int:
        """Индекс в частном, куда пишется первая цифра цикла."""
        return self.length - self.iterations


@dataclass(frozen=True)
class DivisionResult:
    """Результат деления с диагностикой."""

    quotient: FixedPointNumber
    stats: DivisionStats


# =============================================================================
# РАСКЛАДКА
# =============================================================================


def plan_quotient(
    numerator: FixedPointNumber,
    denominator: FixedPointNumber,
    scale: int,
) -> QuotientLayout:
    """
    Вычисление раскладки частного.

    Args:
        numerator: Делимое
        denominator: Ненулевой делитель
        scale: Требуемое число дробных цифр

    Returns:
        QuotientLayout

    Raises:
        DivideByZero: Если все цифры делителя нулевые

    Examples:
        >>> one = FixedPointNumber.from_string("1")
        >>> plan_quotient(one, FixedPointNumber.from_string("1000"), 2).out_of_scale
        True
        >>> plan_quotient(FixedPointNumber.from_string("100"), FixedPointNumber.from_string("7"), 0).iterations
        3
    """
    if denominator.is_zero():
        # Цифры операндов в radix > 36 не печатаются, в лог идёт только раскладка
        logger.warning(
            "divide by zero: numerator_length=%d integer_digits=%d scale=%d",
            numerator.length,
            numerator.integer_digits,
            scale,
        )
        raise DivideByZero("divide by zero")

    divisor_offset = 0
    while denominator.digits[divisor_offset] == 0:
        divisor_offset += 1

    leb = denominator.length - divisor_offset
    lea = numerator.integer_digits + denominator.fractional_digits
    uscal = numerator.fractional_digits - denominator.fractional_digits
    padding = scale - uscal if uscal < scale else 0

    if leb > lea + scale:
        iterations = 0
        integer_digits = 1
    else:
        iterations = lea + scale - leb + 1
        integer_digits = max(lea - leb + 1, 1)

    return QuotientLayout(
        dividend_span=lea,
        divisor_length=leb,
        divisor_offset=divisor_offset,
        padding=padding,
        integer_digits=integer_digits,
        scale=scale,
        iterations=iterations,
    )


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_with_stats(
    numerator: FixedPointNumber,
    denominator: FixedPointNumber,
    base: int = DEFAULT_BASE,
    scale: int = 0,
    allocator: DigitAllocator | None = None,
) -> DivisionResult:
    """
    Деление с возвратом счётчиков Algorithm D.

    Args:
        numerator: Делимое
        denominator: Делитель
        base: Radix (>= 2)
        scale: Число дробных цифр результата (>= 0)
        allocator: Аллокатор scratch-буферов (default: списки Python)

    Returns:
        DivisionResult(quotient, stats)

    Raises:
        DivideByZero: Если делитель равен нулю
        AllocationFailure: Если не удалось выделить scratch-буфер
        ValueError: Если base/scale невалидны или цифра операнда вне radix
    """
    validate_base(base)
    validate_scale(scale)
    numerator.validate_radix(base, "numerator")
    denominator.validate_radix(base, "denominator")

    layout = plan_quotient(numerator, denominator, scale)
    stats = DivisionStats(out_of_scale=layout.out_of_scale)
    quotient = [0] * layout.length

    logger.debug(
        "division layout: span=%d divisor_length=%d iterations=%d scale=%d base=%d",
        layout.dividend_span,
        layout.divisor_length,
        layout.iterations,
        scale,
        base,
    )

    if not layout.out_of_scale:
        span = layout.dividend_span + scale
        n = layout.divisor_length
        dividend = numerator.digits + (0,) * layout.padding

        with scratch_buffers(allocator) as arena:
            # Slot в [0] под перенос нормализации, ноль в конце под u[i + 2]
            u = arena.allocate(span + 2)
            u[1 : span + 1] = dividend[:span]

            v = arena.allocate(n + 1)
            v[1:] = denominator.digits[layout.divisor_offset :]

            product = arena.allocate(n + 1)

            stats.normalization_factor = normalize(u, v, base)
            produce_quotient_digits(
                u,
                v,
                product,
                quotient,
                layout.first_digit,
                layout.iterations,
                base,
                stats,
            )

    logger.debug(
        "division done: norm=%d refinements=%d max_refinements=%d add_backs=%d",
        stats.normalization_factor,
        stats.refinements,
        stats.max_refinements,
        stats.add_backs,
    )

    result = FixedPointNumber(
        digits=quotient,
        integer_digits=layout.integer_digits,
        sign=result_sign(numerator, denominator),
    )
    return DivisionResult(quotient=result.trim_leading_zeros(), stats=stats)


def divide(
    numerator: FixedPointNumber,
    denominator: FixedPointNumber,
    base: int = DEFAULT_BASE,
    scale: int = 0,
    allocator: DigitAllocator | None = None,
) -> FixedPointNumber:
    """
    Деление numerator / denominator, усечённое до scale дробных цифр.

    Examples:
        >>> seven, two = FixedPointNumber.from_string("7"), FixedPointNumber.from_string("2")
        >>> str(divide(seven, two, 10, 2))
        '3.50'
        >>> str(divide(FixedPointNumber.from_string("1"), FixedPointNumber.from_string("3"), 10, 5))
        '0.33333'

    Raises:
        DivideByZero: Если делитель равен нулю
    """
    return divide_with_stats(numerator, denominator, base, scale, allocator).quotient
