"""
Тесты для scratch-буферов

Проверяет:
1. Zero-initialized выделение и очистку при release
2. Освобождение всех буферов на выходе из scratch_buffers, включая исключения
3. Учёт TrackingAllocator
4. AllocationFailure при MemoryError аллокатора
"""

import pytest

from arbitraire.core.exceptions import AllocationFailure, ArbitraireError
from arbitraire.core.math.scratch import (
    DigitAllocator,
    ScratchArena,
    TrackingAllocator,
    scratch_buffers,
)


class ExhaustedAllocator(DigitAllocator):
    def allocate(self, size: int) -> list[int]:
        raise MemoryError("out of memory")


class TestDigitAllocator:
    """Тесты для DigitAllocator"""

    def test_zero_initialized(self) -> None:
        """Буфер заполнен нулями"""
        assert DigitAllocator().allocate(4) == [0, 0, 0, 0]

    def test_release_clears(self) -> None:
        """Освобождённый буфер пуст"""
        allocator = DigitAllocator()
        buffer = allocator.allocate(3)
        allocator.release(buffer)
        assert buffer == []

    def test_negative_size(self) -> None:
        """Отрицательный размер — ValueError"""
        with pytest.raises(ValueError, match="non-negative"):
            DigitAllocator().allocate(-1)


class TestTrackingAllocator:
    """Тесты для TrackingAllocator"""

    def test_counts(self) -> None:
        """allocations, releases, live, peak_live"""
        tracker = TrackingAllocator()
        first = tracker.allocate(2)
        second = tracker.allocate(2)
        tracker.release(first)
        tracker.allocate(1)

        assert tracker.allocations == 3
        assert tracker.releases == 1
        assert tracker.live == 2
        assert tracker.peak_live == 2

        tracker.release(second)
        assert tracker.live == 1


class TestScratchBuffers:
    """Тесты для scratch_buffers / ScratchArena"""

    def test_released_on_exit(self) -> None:
        """Все буферы освобождаются в конце блока"""
        tracker = TrackingAllocator()
        with scratch_buffers(tracker) as arena:
            buffer = arena.allocate(5)
            arena.allocate(2)
            assert tracker.live == 2

        assert tracker.live == 0
        assert buffer == []

    def test_released_on_exception(self) -> None:
        """Исключение внутри блока не оставляет живых буферов"""
        tracker = TrackingAllocator()
        with pytest.raises(RuntimeError):
            with scratch_buffers(tracker) as arena:
                arena.allocate(5)
                raise RuntimeError("boom")

        assert tracker.allocations == 1
        assert tracker.live == 0

    def test_default_allocator(self) -> None:
        """Без аллокатора используются списки Python"""
        with scratch_buffers() as arena:
            assert arena.allocate(3) == [0, 0, 0]

    def test_allocation_failure(self) -> None:
        """MemoryError аллокатора → AllocationFailure с размером и причиной"""
        arena = ScratchArena(ExhaustedAllocator())
        with pytest.raises(AllocationFailure) as exc_info:
            arena.allocate(42)

        error = exc_info.value
        assert error.size == 42
        assert "42" in str(error)
        assert isinstance(error, MemoryError)
        assert isinstance(error, ArbitraireError)
        assert isinstance(error.__cause__, MemoryError)

    def test_release_all_idempotent(self) -> None:
        """Повторный release_all ничего не делает"""
        tracker = TrackingAllocator()
        arena = ScratchArena(tracker)
        arena.allocate(1)
        arena.release_all()
        arena.release_all()
        assert tracker.releases == 1
