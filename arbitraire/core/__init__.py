"""
Core domain models and arithmetic primitives.

Содержит представление fixed-point чисел и алгоритмы над массивами цифр,
не зависящие от внешнего окружения.
"""
