"""
Tests for the Property Checker
"""

import pytest

from algebraic_structures import (
    is_associative,
    is_commutative,
    is_identity,
    is_inverse,
    is_left_distributive,
    is_left_inverse,
    is_right_distributive,
)


def power_times_base(a, b):
    return a ** b * a


def addition(a, b):
    return a + b


def subtraction(a, b):
    return a - b


def multiplication(a, b):
    return a * b


class TestPropertyChecker:
    def test_is_commutative(self):
        assert is_commutative(1, 2, addition)
        assert is_commutative(1, 2, multiplication)
        assert not is_commutative(1, 2, subtraction)
        assert not is_commutative(1, 2, power_times_base)

    def test_is_associative(self):
        assert is_associative(1, 2, 3, addition)
        assert is_associative(1, 2, 3, multiplication)
        assert is_associative(1, 2, 3, power_times_base)
        assert not is_associative(1, 2, 3, subtraction)

    def test_is_identity(self):
        assert is_identity(1, 0, addition)
        assert is_identity(5, 1, multiplication)
        assert not is_identity(2, 1, power_times_base)

    def test_identity_must_be_two_sided(self):
        # 0 is a right identity of subtraction only
        assert subtraction(3, 0) == 3
        assert not is_identity(3, 0, subtraction)

    def test_is_inverse(self):
        assert is_inverse(1, -1, 0, addition)
        assert not is_inverse(1, -1, 0, subtraction)
        assert not is_inverse(1, -1, 1, multiplication)

    def test_is_left_inverse(self):
        assert is_left_inverse(1, -1, 0, addition)
        assert is_left_inverse(1, 1, 0, subtraction)
        assert not is_left_inverse(2, 1, 0, subtraction)

    def test_distributivity(self):
        assert is_left_distributive(1, 2, 3, addition, multiplication)
        assert is_right_distributive(1, 2, 3, addition, multiplication)
        assert not is_left_distributive(1, 2, 3, multiplication, addition)
        assert not is_right_distributive(1, 2, 3, multiplication, addition)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
