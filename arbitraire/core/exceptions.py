"""
Exceptions — иерархия ошибок arbitraire

Иерархия:
    ArbitraireError (базовая)
    ├── DivideByZero        (также ZeroDivisionError)
    └── AllocationFailure   (также MemoryError)

Ошибки обнаруживаются на входе драйвера и пробрасываются вызывающему.
Частичные результаты на error-path не возвращаются.
"""


class ArbitraireError(Exception):
    """Базовая ошибка для всех операций arbitraire."""

    pass


class DivideByZero(ArbitraireError, ZeroDivisionError):
    """
    Деление на нулевой делитель.

    Поднимается для любого делителя, все цифры которого нулевые, включая
    значения, построенные вручную с лишними ведущими нулями.
    """

    pass


class AllocationFailure(ArbitraireError, MemoryError):
    """
    Не удалось выделить scratch-буфер.

    Оригинальный MemoryError доступен через __cause__.
    """

    def __init__(self, size: int):
        super().__init__(f"failed to allocate scratch buffer of {size} digits")
        self.size = size
