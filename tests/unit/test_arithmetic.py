"""
Тесты для сложения, вычитания и умножения

Проверяет:
1. Известные значения и правило знака
2. Scale результата (max для add/subtract, сумма для multiply)
3. Точность против целочисленного оракула в разных radix
"""

import random

import pytest

from arbitraire.core.domain import FixedPointNumber, Sign
from arbitraire.core.math.arithmetic import add, multiply, subtract


def fp(text: str, base: int = 10) -> FixedPointNumber:
    return FixedPointNumber.from_string(text, base)


def signed_value(number: FixedPointNumber, base: int) -> int:
    value = 0
    for digit in number.digits:
        value = value * base + digit
    return -value if number.is_negative() else value


def random_number(rng: random.Random, base: int) -> FixedPointNumber:
    length = rng.randint(1, 10)
    return FixedPointNumber(
        digits=[rng.randrange(base) for _ in range(length)],
        integer_digits=rng.randint(1, length),
        sign=rng.choice([Sign.POSITIVE, Sign.NEGATIVE]),
    )


class TestAdd:
    """Тесты для add"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1", "2", "3"),
            ("9.5", "0.75", "10.25"),
            ("999", "1", "1000"),
            ("-3", "1.5", "-1.5"),
            ("3", "-1.5", "1.5"),
            ("-2", "-2.25", "-4.25"),
            ("1.5", "-1.50", "0.00"),
            ("0", "0.000", "0.000"),
        ],
    )
    def test_examples(self, a: str, b: str, expected: str) -> None:
        """Известные значения"""
        assert str(add(fp(a), fp(b))) == expected

    def test_cancellation_is_positive_zero(self) -> None:
        """a + (-a) — положительный ноль"""
        result = add(fp("-7.25"), fp("7.25"))
        assert result.is_zero()
        assert result.sign is Sign.POSITIVE

    def test_hex(self) -> None:
        """Сложение в base 16"""
        assert str(add(fp("FF", 16), fp("1", 16), 16)) == "100"

    @pytest.mark.parametrize("base", [2, 10, 16, 1000])
    def test_against_integer_oracle(self, base: int) -> None:
        """Сумма и разность совпадают с целочисленными"""
        rng = random.Random(base)
        for _ in range(200):
            a = random_number(rng, base)
            b = random_number(rng, base)
            scale = max(a.fractional_digits, b.fractional_digits)
            a_value = signed_value(a, base) * base ** (scale - a.fractional_digits)
            b_value = signed_value(b, base) * base ** (scale - b.fractional_digits)

            total = add(a, b, base)
            difference = subtract(a, b, base)

            assert total.fractional_digits == scale
            assert difference.fractional_digits == scale
            assert signed_value(total, base) == a_value + b_value
            assert signed_value(difference, base) == a_value - b_value


class TestSubtract:
    """Тесты для subtract"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("5", "3", "2"),
            ("3", "5", "-2"),
            ("1000", "0.001", "999.999"),
            ("-1", "-1", "0"),
            ("-1", "1", "-2"),
        ],
    )
    def test_examples(self, a: str, b: str, expected: str) -> None:
        """Известные значения"""
        assert str(subtract(fp(a), fp(b))) == expected


class TestMultiply:
    """Тесты для multiply"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("12", "12", "144"),
            ("1.5", "-0.2", "-0.30"),
            ("-0.5", "-0.5", "0.25"),
            ("999", "999", "998001"),
            ("0", "-12.5", "0.0"),
            ("0.001", "0.001", "0.000001"),
        ],
    )
    def test_examples(self, a: str, b: str, expected: str) -> None:
        """Известные значения, scale = frac(a) + frac(b)"""
        assert str(multiply(fp(a), fp(b))) == expected

    def test_zero_product_is_positive(self) -> None:
        """Произведение с нулём положительное"""
        assert multiply(fp("-3"), fp("0")).sign is Sign.POSITIVE

    @pytest.mark.parametrize("base", [2, 3, 10, 256])
    def test_against_integer_oracle(self, base: int) -> None:
        """Произведение совпадает с целочисленным"""
        rng = random.Random(base * 7)
        for _ in range(200):
            a = random_number(rng, base)
            b = random_number(rng, base)

            product = multiply(a, b, base)

            assert product.fractional_digits == a.fractional_digits + b.fractional_digits
            assert signed_value(product, base) == signed_value(a, base) * signed_value(b, base)
            assert product.integer_digits == 1 or product.digits[0] != 0


class TestValidation:
    """Валидация операндов"""

    def test_digit_out_of_radix(self) -> None:
        """Цифра операнда >= base"""
        with pytest.raises(ValueError, match="out of range"):
            add(fp("9"), fp("1"), 8)
        with pytest.raises(ValueError, match="out of range"):
            multiply(fp("1"), fp("A", 16), 10)

    def test_invalid_base(self) -> None:
        """base < 2"""
        with pytest.raises(ValueError, match="base"):
            subtract(fp("1"), fp("1"), 1)
