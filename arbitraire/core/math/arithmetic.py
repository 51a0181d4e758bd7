"""
Arithmetic — сложение, вычитание и умножение fixed-point чисел

Школьные алгоритмы над выровненными массивами цифр, построенные на тех же
примитивах, что и деление (digit_arrays). Используются modulo для
вычисления a - b * (a / b).

Scale результата:
- add/subtract: max(frac(a), frac(b))
- multiply: frac(a) + frac(b)
Результаты канонические (trim ведущих нулей, ноль положительный).
"""

from arbitraire.core.domain.fixed_point import (
    FixedPointNumber,
    Sign,
    compare_magnitude,
    result_sign,
    validate_base,
)
from arbitraire.core.math.digit_arrays import (
    short_multiply,
    windowed_add,
    windowed_subtract,
)


def _aligned_digits(
    number: FixedPointNumber, integer_digits: int, fractional_digits: int
) -> list[int]:
    """Цифры модуля, дополненные нулями до заданной раскладки."""
    return (
        [0] * (integer_digits - number.integer_digits)
        + list(number.digits)
        + [0] * (fractional_digits - number.fractional_digits)
    )


def _validate_operands(a: FixedPointNumber, b: FixedPointNumber, base: int) -> None:
    validate_base(base)
    a.validate_radix(base, "a")
    b.validate_radix(base, "b")


def _add_magnitudes(
    a: FixedPointNumber, b: FixedPointNumber, base: int, sign: Sign
) -> FixedPointNumber:
    # +1 целая цифра под перенос
    integer_digits = max(a.integer_digits, b.integer_digits) + 1
    fractional_digits = max(a.fractional_digits, b.fractional_digits)

    total = _aligned_digits(a, integer_digits, fractional_digits)
    carry = windowed_add(total, 0, _aligned_digits(b, integer_digits, fractional_digits), base)
    assert carry == 0

    result = FixedPointNumber(digits=total, integer_digits=integer_digits, sign=sign)
    return result.trim_leading_zeros()


def _subtract_magnitudes(
    larger: FixedPointNumber, smaller: FixedPointNumber, base: int, sign: Sign
) -> FixedPointNumber:
    integer_digits = max(larger.integer_digits, smaller.integer_digits)
    fractional_digits = max(larger.fractional_digits, smaller.fractional_digits)

    difference = _aligned_digits(larger, integer_digits, fractional_digits)
    borrow = windowed_subtract(
        difference, 0, _aligned_digits(smaller, integer_digits, fractional_digits), base
    )
    assert borrow == 0

    result = FixedPointNumber(digits=difference, integer_digits=integer_digits, sign=sign)
    return result.trim_leading_zeros()


def add(a: FixedPointNumber, b: FixedPointNumber, base: int = 10) -> FixedPointNumber:
    """
    Точное сложение.

    Examples:
        >>> str(add(FixedPointNumber.from_string("9.5"), FixedPointNumber.from_string("0.75")))
        '10.25'
        >>> str(add(FixedPointNumber.from_string("-3"), FixedPointNumber.from_string("1.5")))
        '-1.5'
    """
    _validate_operands(a, b, base)

    if a.is_negative() == b.is_negative():
        sign = Sign.NEGATIVE if a.is_negative() else Sign.POSITIVE
        return _add_magnitudes(a, b, base, sign)

    order = compare_magnitude(a, b)
    if order == 0:
        return FixedPointNumber.zero(max(a.fractional_digits, b.fractional_digits))
    if order > 0:
        return _subtract_magnitudes(a, b, base, a.sign)
    return _subtract_magnitudes(b, a, base, b.sign)


def subtract(a: FixedPointNumber, b: FixedPointNumber, base: int = 10) -> FixedPointNumber:
    """Точное вычитание a - b."""
    return add(a, b.negate(), base)


def multiply(a: FixedPointNumber, b: FixedPointNumber, base: int = 10) -> FixedPointNumber:
    """
    Точное умножение (школьный алгоритм, одна строка на цифру b).

    Examples:
        >>> str(multiply(FixedPointNumber.from_string("1.5"), FixedPointNumber.from_string("-0.2")))
        '-0.30'
    """
    _validate_operands(a, b, base)

    size_a = a.length
    size_b = b.length
    total = [0] * (size_a + size_b)
    row = [0] * (size_a + 1)

    for k in range(size_b - 1, -1, -1):
        digit = b.digits[k]
        if digit == 0:
            continue
        short_multiply(list(a.digits), digit, base, row)
        # Младшая цифра строки ложится в позицию size_a + k
        carry = windowed_add(total, k, row, base)
        assert carry == 0

    result = FixedPointNumber(
        digits=total,
        integer_digits=a.integer_digits + b.integer_digits,
        sign=result_sign(a, b),
    )
    return result.trim_leading_zeros()
