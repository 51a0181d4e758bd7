"""
FixedPointNumber — Модель числа с фиксированной точкой

Immutable Pydantic модель числа произвольной точности в произвольном radix.
Цифры хранятся от старшей к младшей; первые integer_digits цифр лежат слева
от точки, остальные (fractional_digits) — справа.

Radix в модели не хранится: диапазон цифр [0, base-1] проверяется каждой
операцией, которой передан base.

ИНВАРИАНТЫ:
1. len(digits) >= 1, 1 <= integer_digits <= len(digits)
2. Все цифры неотрицательны
3. Результаты операций канонические: без лишних ведущих нулей в целой части
   (кроме единственного нуля), ноль всегда положительный
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Алфавит цифр для текстового представления (radix до 36)
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MIN_BASE: Final[int] = 2
MAX_TEXT_BASE: Final[int] = len(DIGIT_ALPHABET)

RADIX_POINT: Final[str] = "."


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_base(base: int, name: str = "base") -> None:
    """
    Валидация radix.

    Raises:
        ValueError: Если base не целое или base < MIN_BASE
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise ValueError(f"{name} must be an integer, got {base!r}")

    if base < MIN_BASE:
        raise ValueError(f"{name} must be >= {MIN_BASE}, got {base}")


def validate_scale(scale: int, name: str = "scale") -> None:
    """
    Валидация scale (количество дробных цифр).

    Raises:
        ValueError: Если scale не целое или отрицательное
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValueError(f"{name} must be an integer, got {scale!r}")

    if scale < 0:
        raise ValueError(f"{name} must be non-negative, got {scale}")


def _digit_value(char: str, base: int) -> int:
    value = DIGIT_ALPHABET.find(char.upper())
    if value < 0 or value >= base:
        raise ValueError(f"invalid digit {char!r} for base {base}")
    return value


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак числа (значим только для ненулевых значений)"""

    POSITIVE = "+"
    NEGATIVE = "-"


# =============================================================================
# FIXED POINT NUMBER
# =============================================================================


class FixedPointNumber(BaseModel):
    """
    Число с фиксированной точкой произвольной точности.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.

    Examples:
        >>> str(FixedPointNumber.from_string("-12.50"))
        '-12.50'
        >>> FixedPointNumber.from_string("0.05").fractional_digits
        2
    """

    digits: tuple[int, ...] = Field(
        ..., min_length=1, description="Цифры от старшей к младшей"
    )
    integer_digits: int = Field(..., ge=1, description="Количество цифр слева от точки")
    sign: Sign = Field(default=Sign.POSITIVE, description="Знак числа")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits_non_negative(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Цифры не могут быть отрицательными."""
        for digit in v:
            if digit < 0:
                raise ValueError(f"digit must be non-negative, got {digit}")
        return v

    @model_validator(mode="after")
    def validate_integer_digits(self) -> "FixedPointNumber":
        """Целая часть не может быть длиннее всего числа."""
        if self.integer_digits > len(self.digits):
            raise ValueError(
                f"integer_digits {self.integer_digits} exceeds "
                f"digit count {len(self.digits)}"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, scale: int = 0) -> "FixedPointNumber":
        """
        Ноль с scale дробными нулевыми цифрами.

        Examples:
            >>> str(FixedPointNumber.zero(3))
            '0.000'
        """
        validate_scale(scale)
        return cls(digits=(0,) * (scale + 1), integer_digits=1)

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> "FixedPointNumber":
        """
        Разбор текстового представления.

        Формат: [+|-]digits[.digits], цифры 0-9A-Z (регистр не важен).
        ".5" разбирается как 0.5, "5." как 5. Лишние ведущие нули целой
        части отбрасываются, "-0" даёт положительный ноль.

        Args:
            text: Текстовое представление числа
            base: Radix (2..36)

        Returns:
            Каноническое FixedPointNumber

        Raises:
            ValueError: Если текст не является числом в данном radix
        """
        validate_base(base)
        if base > MAX_TEXT_BASE:
            raise ValueError(f"base must be <= {MAX_TEXT_BASE} for text, got {base}")

        body = text.strip()
        sign = Sign.POSITIVE
        if body[:1] in ("+", "-"):
            if body[0] == "-":
                sign = Sign.NEGATIVE
            body = body[1:]

        whole, _, fraction = body.partition(RADIX_POINT)
        if not whole and not fraction:
            raise ValueError(f"not a number: {text!r}")
        if RADIX_POINT in fraction:
            raise ValueError(f"more than one radix point in {text!r}")

        whole = whole or "0"
        digits = [_digit_value(ch, base) for ch in whole + fraction]

        number = cls(digits=digits, integer_digits=len(whole), sign=sign)
        return number.trim_leading_zeros()

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Общее количество цифр (целые + дробные)."""
        return len(self.digits)

    @property
    def fractional_digits(self) -> int:
        """Количество цифр справа от точки."""
        return len(self.digits) - self.integer_digits

    def is_zero(self) -> bool:
        """True если все цифры нулевые (знак игнорируется)."""
        return not any(self.digits)

    def is_negative(self) -> bool:
        """True для ненулевых отрицательных значений."""
        return self.sign is Sign.NEGATIVE and not self.is_zero()

    def validate_radix(self, base: int, name: str = "number") -> None:
        """
        Проверка, что все цифры лежат в [0, base-1].

        Raises:
            ValueError: Если встречается цифра >= base
        """
        for digit in self.digits:
            if digit >= base:
                raise ValueError(f"{name} has digit {digit} out of range for base {base}")

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def trim_leading_zeros(self) -> "FixedPointNumber":
        """
        Каноническая форма: без лишних ведущих нулей в целой части.

        Сохраняет минимум одну целую цифру и дробную часть без изменений.
        Ноль становится положительным.
        """
        lead = 0
        while lead < self.integer_digits - 1 and self.digits[lead] == 0:
            lead += 1

        sign = Sign.POSITIVE if self.is_zero() else self.sign
        if lead == 0 and sign is self.sign:
            return self

        return FixedPointNumber(
            digits=self.digits[lead:],
            integer_digits=self.integer_digits - lead,
            sign=sign,
        )

    def rescale(self, scale: int) -> "FixedPointNumber":
        """
        Приведение дробной части к scale цифрам.

        Лишние цифры отбрасываются (усечение, без округления), недостающие
        дополняются нулями.

        Examples:
            >>> str(FixedPointNumber.from_string("3.14159").rescale(2))
            '3.14'
            >>> str(FixedPointNumber.from_string("7").rescale(2))
            '7.00'
        """
        validate_scale(scale)
        missing = scale - self.fractional_digits
        if missing >= 0:
            digits = self.digits + (0,) * missing
        else:
            digits = self.digits[: self.integer_digits + scale]

        number = FixedPointNumber(
            digits=digits, integer_digits=self.integer_digits, sign=self.sign
        )
        return number.trim_leading_zeros()

    def with_sign(self, sign: Sign) -> "FixedPointNumber":
        """Копия с заданным знаком (ноль остаётся положительным)."""
        if self.is_zero():
            sign = Sign.POSITIVE
        if sign is self.sign:
            return self
        return FixedPointNumber(
            digits=self.digits, integer_digits=self.integer_digits, sign=sign
        )

    def negate(self) -> "FixedPointNumber":
        """Смена знака."""
        flipped = Sign.POSITIVE if self.sign is Sign.NEGATIVE else Sign.NEGATIVE
        return self.with_sign(flipped)

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Текстовое представление (обратное from_string).

        Дробная часть печатается полностью, включая хвостовые нули.

        Raises:
            ValueError: Если цифра не представима алфавитом (radix > 36)
        """
        if max(self.digits) >= MAX_TEXT_BASE:
            raise ValueError(f"digit out of text alphabet range (base <= {MAX_TEXT_BASE})")

        whole = "".join(DIGIT_ALPHABET[d] for d in self.digits[: self.integer_digits])
        fraction = "".join(DIGIT_ALPHABET[d] for d in self.digits[self.integer_digits :])

        text = f"{whole}{RADIX_POINT}{fraction}" if fraction else whole
        if self.is_negative():
            return f"-{text}"
        return text

    def __str__(self) -> str:
        return self.to_string()


# =============================================================================
# СРАВНЕНИЕ И ЗНАК
# =============================================================================


def compare_magnitude(a: FixedPointNumber, b: FixedPointNumber) -> int:
    """
    Трёхзначное сравнение модулей.

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|

    Examples:
        >>> compare_magnitude(FixedPointNumber.from_string("-2"), FixedPointNumber.from_string("1.5"))
        1
        >>> compare_magnitude(FixedPointNumber.from_string("1.50"), FixedPointNumber.from_string("1.5"))
        0
    """
    a = a.trim_leading_zeros()
    b = b.trim_leading_zeros()

    # После trim длина целой части отражает порядок величины
    if a.integer_digits != b.integer_digits:
        return 1 if a.integer_digits > b.integer_digits else -1

    width = max(a.fractional_digits, b.fractional_digits)
    a_digits = a.digits + (0,) * (width - a.fractional_digits)
    b_digits = b.digits + (0,) * (width - b.fractional_digits)

    if a_digits == b_digits:
        return 0
    return 1 if a_digits > b_digits else -1


def result_sign(a: FixedPointNumber, b: FixedPointNumber) -> Sign:
    """
    Знак результата для умножения/деления двух операндов.

    Одинаковые знаки → POSITIVE, разные → NEGATIVE, нулевой операнд →
    POSITIVE.
    """
    if a.is_zero() or b.is_zero():
        return Sign.POSITIVE

    if a.is_negative() == b.is_negative():
        return Sign.POSITIVE
    return Sign.NEGATIVE
