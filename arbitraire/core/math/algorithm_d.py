"""
Algorithm D — получение цифр частного (Knuth, TAOCP vol. 2, 4.3.1)

Одна итерация даёт ровно одну цифру частного:
    D3. Пробная цифра qhat по двум старшим цифрам окна и v0,
        уточнение по третьей цифре окна и v1 (не более двух декрементов
        при нормализованном делителе)
    D4. Умножение делителя на qhat и вычитание из окна остатка
    D6. Если вычитание дало заём — qhat -= 1 и делитель прибавляется обратно
        (перенос отбрасывается)

Раскладка scratch-буферов (см. normalization):
    u = [slot, u1, u2, ..., u_{m+n}, 0]   — делимое после нормализации
    v = [slot, v0, v1, ..., v_{n-1}]      — нормализованный делитель
Окно для позиции i: u[i : i + n + 1].

Остаток после цикла лежит в u, но не возвращается: modulo вычисляется
отдельно по тождеству a - b * (a / b).
"""

from dataclasses import dataclass
from typing import Final

from arbitraire.core.math.digit_arrays import (
    short_multiply,
    windowed_add,
    windowed_subtract,
)

# Верхняя граница декрементов пробной цифры при нормализованном делителе
MAX_REFINEMENT_STEPS: Final[int] = 2


@dataclass
class DivisionStats:
    """
    Счётчики одного вызова деления.

    Attributes:
        iterations: Количество произведённых цифр частного
        refinements: Суммарное число декрементов пробной цифры в D3
        max_refinements: Максимум декрементов D3 для одной цифры (<= 2)
        add_backs: Количество откатов D6
        normalization_factor: Применённый множитель нормализации
        out_of_scale: True если цикл не запускался (частное = 0 на scale)
    """

    iterations: int = 0
    refinements: int = 0
    max_refinements: int = 0
    add_backs: int = 0
    normalization_factor: int = 1
    out_of_scale: bool = False


def produce_quotient_digits(
    u: list[int],
    v: list[int],
    product: list[int],
    quotient: list[int],
    first: int,
    iterations: int,
    base: int,
    stats: DivisionStats | None = None,
) -> None:
    """
    Основной цикл Algorithm D.

    Args:
        u: Нормализованное делимое со slot в [0] и нулевой ячейкой в конце
           (мутируется: в нём накапливается остаток)
        v: Нормализованный делитель со slot в [0], len(v) = n + 1
        product: Буфер длины n + 1 под v * qhat
        quotient: Выходной буфер цифр частного
        first: Индекс в quotient для первой цифры
        iterations: Количество цифр частного (вычислено заранее драйвером)
        base: Radix
        stats: Счётчики для заполнения (optional)
    """
    n = len(v) - 1
    v0 = v[1]
    v1 = v[2] if n > 1 else 0

    for i in range(iterations):
        # D3: пробная цифра
        top = u[i] * base + u[i + 1]
        qhat = base - 1 if u[i] == v0 else top // v0

        steps = 0
        while v1 * qhat > (top - v0 * qhat) * base + u[i + 2]:
            qhat -= 1
            steps += 1
        assert steps <= MAX_REFINEMENT_STEPS, "trial digit refined more than twice"

        # D4: умножение и вычитание
        added_back = False
        if qhat:
            short_multiply(v, qhat, base, product)
            if windowed_subtract(u, i, product, base):
                # D6: qhat был на единицу больше
                qhat -= 1
                windowed_add(u, i, v, base)
                added_back = True

        quotient[first + i] = qhat

        if stats is not None:
            stats.iterations += 1
            stats.refinements += steps
            stats.max_refinements = max(stats.max_refinements, steps)
            if added_back:
                stats.add_backs += 1
