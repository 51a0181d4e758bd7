"""
Test suite for arbitraire

Contains:
- tests/unit/          : Unit tests for digit primitives, Algorithm D, division and engine
"""
