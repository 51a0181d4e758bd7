"""
Normalization — подготовка операндов к Algorithm D

Делимое и делитель умножаются на norm = base // (v0 + 1), где v0 — старшая
цифра делителя. Частное не меняется, а старшая цифра делителя становится
>= base // 2, что ограничивает ошибку пробной цифры частного двумя.
"""

from arbitraire.core.math.digit_arrays import short_multiply


def normalization_factor(leading_digit: int, base: int) -> int:
    """
    Множитель нормализации для старшей цифры делителя.

    Args:
        leading_digit: Старшая (ненулевая) цифра делителя
        base: Radix

    Returns:
        base // (leading_digit + 1)

    Raises:
        ValueError: Если цифра нулевая или вне radix

    Examples:
        >>> normalization_factor(1, 10)
        5
        >>> normalization_factor(7, 10)
        1
    """
    if not 0 < leading_digit < base:
        raise ValueError(
            f"leading divisor digit must be in [1, {base - 1}], got {leading_digit}"
        )
    return base // (leading_digit + 1)


def normalize(numerator: list[int], denominator: list[int], base: int) -> int:
    """
    Нормализация scratch-буферов на месте.

    Оба буфера несут reserved slot в [0]; старшая цифра делителя — в [1].
    При norm == 1 буферы не трогаются.

    Args:
        numerator: Scratch-делимое (мутируется)
        denominator: Scratch-делитель (мутируется)
        base: Radix

    Returns:
        Применённый множитель norm
    """
    norm = normalization_factor(denominator[1], base)
    if norm == 1:
        return norm

    carry = short_multiply(numerator, norm, base)
    assert carry == 0, "numerator carry escaped the reserved slot"

    carry = short_multiply(denominator, norm, base)
    assert carry == 0 and denominator[0] == 0, "normalized divisor grew a digit"

    return norm
