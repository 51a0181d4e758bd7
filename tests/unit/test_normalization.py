"""
Тесты для нормализации делителя

Проверяет:
1. Множитель norm = base // (v0 + 1)
2. Старшая цифра нормализованного делителя >= base // 2
3. Отношение делимое/делитель не меняется
4. norm == 1 не трогает буферы
"""

import random

import pytest

from arbitraire.core.math.normalization import normalization_factor, normalize


def to_int(digits: list[int], base: int) -> int:
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


class TestNormalizationFactor:
    """Тесты для normalization_factor"""

    @pytest.mark.parametrize(
        "leading, base, expected",
        [(1, 10, 5), (2, 10, 3), (4, 10, 2), (5, 10, 1), (9, 10, 1), (1, 2, 1), (1, 256, 128)],
    )
    def test_factor(self, leading: int, base: int, expected: int) -> None:
        """norm = base // (v0 + 1)"""
        assert normalization_factor(leading, base) == expected

    @pytest.mark.parametrize("leading", [0, 10, -1])
    def test_invalid_leading_digit(self, leading: int) -> None:
        """Нулевая или вне radix старшая цифра — ошибка"""
        with pytest.raises(ValueError, match="leading divisor digit"):
            normalization_factor(leading, 10)


class TestNormalize:
    """Тесты для normalize"""

    @pytest.mark.parametrize("base", [2, 3, 7, 10, 16, 100, 1000])
    def test_leading_digit_at_least_half_base(self, base: int) -> None:
        """После нормализации v0 >= base // 2 для всех старших цифр"""
        rng = random.Random(base)
        for leading in range(1, base):
            tail = [rng.randrange(base) for _ in range(rng.randint(0, 4))]
            u = [0] + [rng.randrange(base) for _ in range(6)] + [0]
            v = [0, leading] + tail

            normalize(u, v, base)

            assert v[0] == 0
            assert v[1] >= base // 2

    @pytest.mark.parametrize("base", [2, 10, 60])
    def test_scales_both_operands_equally(self, base: int) -> None:
        """Делимое и делитель умножаются на один и тот же norm"""
        rng = random.Random(base + 1)
        for _ in range(200):
            u_digits = [rng.randrange(base) for _ in range(rng.randint(1, 10))]
            v_digits = [rng.randrange(1, base)] + [
                rng.randrange(base) for _ in range(rng.randint(0, 5))
            ]
            u = [0] + u_digits
            v = [0] + v_digits

            norm = normalize(u, v, base)

            assert to_int(u, base) == to_int(u_digits, base) * norm
            assert to_int(v, base) == to_int(v_digits, base) * norm

    def test_already_normalized_untouched(self) -> None:
        """norm == 1 — буферы не меняются"""
        u = [0, 1, 2, 3]
        v = [0, 7, 1]
        assert normalize(u, v, 10) == 1
        assert u == [0, 1, 2, 3]
        assert v == [0, 7, 1]
