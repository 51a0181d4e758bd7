"""
Scratch Buffers — временные буферы цифр с областью жизни одного вызова

Деление строит нормализованные копии операндов и буфер произведения.
Они принадлежат только создавшему их вызову и освобождаются до возврата
на любом пути выхода, включая исключения.

Использование:
    with scratch_buffers(allocator) as arena:
        u = arena.allocate(n)
        ...
    # все буферы arena освобождены
"""

from contextlib import contextmanager
from typing import Iterator

from arbitraire.core.exceptions import AllocationFailure


# =============================================================================
# ALLOCATORS
# =============================================================================


class DigitAllocator:
    """
    Аллокатор буферов цифр по умолчанию.

    allocate возвращает список нулей заданной длины, release очищает его,
    чтобы освобождённый буфер нельзя было случайно прочитать.
    """

    def allocate(self, size: int) -> list[int]:
        if size < 0:
            raise ValueError(f"buffer size must be non-negative, got {size}")
        return [0] * size

    def release(self, buffer: list[int]) -> None:
        buffer.clear()


class TrackingAllocator(DigitAllocator):
    """
    Аллокатор с учётом выделений для диагностики утечек.

    Attributes:
        allocations: Количество успешных allocate
        releases: Количество release
        peak_live: Максимум одновременно живых буферов
    """

    def __init__(self) -> None:
        self.allocations = 0
        self.releases = 0
        self.peak_live = 0

    @property
    def live(self) -> int:
        """Количество выделенных и ещё не освобождённых буферов."""
        return self.allocations - self.releases

    def allocate(self, size: int) -> list[int]:
        buffer = super().allocate(size)
        self.allocations += 1
        self.peak_live = max(self.peak_live, self.live)
        return buffer

    def release(self, buffer: list[int]) -> None:
        super().release(buffer)
        self.releases += 1


DEFAULT_ALLOCATOR = DigitAllocator()


# =============================================================================
# SCRATCH ARENA
# =============================================================================


class ScratchArena:
    """
    Набор scratch-буферов одного вызова.

    Все буферы, выделенные через arena, освобождаются release_all.
    """

    def __init__(self, allocator: DigitAllocator):
        self._allocator = allocator
        self._buffers: list[list[int]] = []

    def allocate(self, size: int) -> list[int]:
        """
        Выделение zero-initialized буфера.

        Raises:
            AllocationFailure: Если аллокатор не смог выделить память
        """
        try:
            buffer = self._allocator.allocate(size)
        except MemoryError as e:
            raise AllocationFailure(size) from e

        self._buffers.append(buffer)
        return buffer

    def release_all(self) -> None:
        """Освобождение всех буферов в обратном порядке выделения."""
        while self._buffers:
            self._allocator.release(self._buffers.pop())


@contextmanager
def scratch_buffers(allocator: DigitAllocator | None = None) -> Iterator[ScratchArena]:
    """
    Scoped-выделение scratch-буферов.

    Args:
        allocator: Аллокатор (default: DEFAULT_ALLOCATOR)

    Yields:
        ScratchArena, буферы которой освобождаются при выходе из блока
    """
    arena = ScratchArena(allocator or DEFAULT_ALLOCATOR)
    try:
        yield arena
    finally:
        arena.release_all()
