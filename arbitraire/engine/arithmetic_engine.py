"""ArithmeticEngine — фасад с конфигурацией radix/scale по умолчанию

Объединяет разбор чисел, деление, остаток и арифметику под одной
конфигурацией. Операнды принимаются как FixedPointNumber или как строки
в radix конфигурации.
"""

from dataclasses import dataclass

from arbitraire.core.domain.fixed_point import (
    MAX_TEXT_BASE,
    FixedPointNumber,
    validate_base,
    validate_scale,
)
from arbitraire.core.math.arithmetic import add, multiply, subtract
from arbitraire.core.math.division import (
    DEFAULT_BASE,
    DivisionResult,
    divide_with_stats,
)
from arbitraire.core.math.modulo import modulo
from arbitraire.core.math.scratch import DigitAllocator

Operand = FixedPointNumber | str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация ArithmeticEngine.
    
    base и scale используются, если вызов их не переопределяет.
    allocator передаётся делению для scratch-буферов.
    """
    
    base: int = DEFAULT_BASE
    scale: int = 0
    allocator: DigitAllocator | None = None
    
    def __post_init__(self) -> None:
        validate_base(self.base, "config.base")
        validate_scale(self.scale, "config.scale")


# =============================================================================
# ENGINE
# =============================================================================


class ArithmeticEngine:
    """Арифметика fixed-point чисел с общей конфигурацией.
    
    Examples:
        >>> engine = ArithmeticEngine(EngineConfig(scale=3))
        >>> str(engine.divide("22", "7"))
        '3.142'
        >>> str(engine.modulo("22", "7"))
        '1.000'
    """
    
    def __init__(self, config: EngineConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or EngineConfig()
    
    def parse(self, value: Operand) -> FixedPointNumber:
        """Приведение операнда к FixedPointNumber в radix конфигурации."""
        if isinstance(value, FixedPointNumber):
            return value
        if self.config.base > MAX_TEXT_BASE:
            raise ValueError(
                f"text operands need base <= {MAX_TEXT_BASE}, config.base={self.config.base}"
            )
        return FixedPointNumber.from_string(value, self.config.base)
    
    def _scale(self, scale: int | None) -> int:
        return self.config.scale if scale is None else scale
    
    def divide_with_stats(
        self, numerator: Operand, denominator: Operand, scale: int | None = None
    ) -> DivisionResult:
        """Деление с диагностикой Algorithm D."""
        return divide_with_stats(
            self.parse(numerator),
            self.parse(denominator),
            self.config.base,
            self._scale(scale),
            self.config.allocator,
        )
    
    def divide(
        self, numerator: Operand, denominator: Operand, scale: int | None = None
    ) -> FixedPointNumber:
        """Деление, усечённое до scale дробных цифр.
        
        Raises:
            DivideByZero: если делитель равен нулю
        """
        return self.divide_with_stats(numerator, denominator, scale).quotient
    
    def modulo(
        self, a: Operand, b: Operand, scale: int | None = None
    ) -> FixedPointNumber:
        """Остаток a - b * trunc(a / b)."""
        return modulo(
            self.parse(a),
            self.parse(b),
            self.config.base,
            self._scale(scale),
            self.config.allocator,
        )
    
    def add(self, a: Operand, b: Operand) -> FixedPointNumber:
        return add(self.parse(a), self.parse(b), self.config.base)
    
    def subtract(self, a: Operand, b: Operand) -> FixedPointNumber:
        return subtract(self.parse(a), self.parse(b), self.config.base)
    
    def multiply(self, a: Operand, b: Operand) -> FixedPointNumber:
        return multiply(self.parse(a), self.parse(b), self.config.base)
