"""
Digit Arrays — примитивы над многословными массивами цифр

Примитивы, на которых построен Algorithm D:
- short_multiply: массив × одна цифра (перенос справа налево)
- windowed_subtract: u[i..i+k] -= v[0..k] с заёмом
- windowed_add: u[i..i+k] += v[0..k] с переносом (откат пересчёта)

Соглашения:
- Цифры хранятся от старшей к младшей (младшая — последняя)
- Все операции работают над буферами вызывающего, ничего не выделяют
- Мутируется только выходной буфер/окно; делитель v не изменяется

КРИТИЧЕСКИЙ ИНВАРИАНТ (reserved slot):
    Scratch-буферы деления несут ведущую ячейку [0], зарезервированную под
    перенос. Перенос из старшей цифры пишется в неё, массив не растёт.
"""


# =============================================================================
# SHORT MULTIPLY
# =============================================================================


def short_multiply(
    digits: list[int],
    multiplier: int,
    base: int,
    out: list[int] | None = None,
) -> int:
    """
    Умножение массива цифр на одну цифру.

    Результат выравнивается по правому краю out. Если out длиннее digits,
    старший перенос записывается в ячейку перед результатом (reserved slot),
    а оставшиеся ведущие ячейки обнуляются. Если out совпадает по длине с
    digits (в том числе out is digits), перенос возвращается вызывающему.

    Args:
        digits: Множимое (не изменяется, если out не совпадает с ним)
        multiplier: Цифра-множитель в [0, base-1]
        base: Radix
        out: Выходной буфер (default: digits, умножение на месте)

    Returns:
        Перенос, не поместившийся в out (0, если ведущая ячейка была нулевой)

    Raises:
        ValueError: Если out короче digits

    Examples:
        >>> buf = [0, 0, 0, 0]
        >>> short_multiply([9, 9, 9], 9, 10, buf)
        0
        >>> buf
        [8, 9, 9, 1]
    """
    if out is None:
        out = digits

    size = len(digits)
    shift = len(out) - size
    if shift < 0:
        raise ValueError(f"output buffer of {len(out)} digits is shorter than input {size}")

    # 0 и 1: только оптимизация
    if multiplier == 0:
        out[:] = [0] * len(out)
        return 0

    if multiplier == 1:
        out[shift:] = digits[:]
        out[:shift] = [0] * shift
        return 0

    carry = 0
    for k in range(size - 1, -1, -1):
        value = digits[k] * multiplier + carry
        out[k + shift] = value % base
        carry = value // base

    if shift:
        out[:shift] = [0] * shift
        out[shift - 1] = carry
        carry = 0

    return carry


# =============================================================================
# WINDOWED SUBTRACT / ADD
# =============================================================================


def windowed_subtract(u: list[int], start: int, v: list[int], base: int) -> int:
    """
    Вычитание v из окна u[start : start + len(v)] на месте.

    Идёт от младшей цифры к старшей, распространяя заём.

    Args:
        u: Остаток (мутируется в пределах окна)
        start: Индекс старшей цифры окна
        v: Вычитаемое той же длины, что и окно
        base: Radix

    Returns:
        Финальный заём: 1 если окно было меньше v (пересчёт цифры частного)

    Examples:
        >>> u = [1, 0, 0]
        >>> windowed_subtract(u, 1, [0, 1], 10)
        1
        >>> u
        [1, 9, 9]
    """
    borrow = 0
    for k in range(len(v) - 1, -1, -1):
        value = u[start + k] - v[k] - borrow
        if value < 0:
            value += base
            borrow = 1
        else:
            borrow = 0
        u[start + k] = value
    return borrow


def windowed_add(u: list[int], start: int, v: list[int], base: int) -> int:
    """
    Прибавление v к окну u[start : start + len(v)] на месте.

    Обратная операция к windowed_subtract, используется только для отката
    (add-back) после пересчёта цифры частного.

    Returns:
        Финальный перенос (в Algorithm D отбрасывается)
    """
    carry = 0
    for k in range(len(v) - 1, -1, -1):
        value = u[start + k] + v[k] + carry
        if value >= base:
            value -= base
            carry = 1
        else:
            carry = 0
        u[start + k] = value
    return carry
