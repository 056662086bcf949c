"""
Property Checker

Predicates testing whether an operation exhibits a law for the given
element(s). These are the single-instance building blocks the brute-force
law checkers quantify over the whole element set.
"""

from typing import Callable, TypeVar

T = TypeVar("T")
BinaryOp = Callable[[T, T], T]


def is_commutative(a: T, b: T, op: BinaryOp) -> bool:
    """Check if ``op(a, b) == op(b, a)``."""
    return op(a, b) == op(b, a)


def is_associative(a: T, b: T, c: T, op: BinaryOp) -> bool:
    """Check if ``op(op(a, b), c) == op(a, op(b, c))``."""
    return op(op(a, b), c) == op(a, op(b, c))


def is_identity(a: T, identity: T, op: BinaryOp) -> bool:
    """
    Check if ``identity`` acts as a two-sided identity on ``a``.

    Args:
        a: The element
        identity: The candidate identity
        op: The operation

    Returns:
        True if ``op(a, identity) == a`` and ``op(identity, a) == a``
    """
    return op(a, identity) == a and op(identity, a) == a


def is_inverse(a: T, b: T, identity: T, op: BinaryOp) -> bool:
    """Check if ``b`` is a right inverse of ``a``: ``op(a, b) == identity``."""
    return op(a, b) == identity


def is_left_inverse(a: T, b: T, identity: T, op: BinaryOp) -> bool:
    """Check if ``b`` is a left inverse of ``a``: ``op(b, a) == identity``."""
    return op(b, a) == identity


def is_left_distributive(a: T, b: T, c: T, inner: BinaryOp, outer: BinaryOp) -> bool:
    """
    Check left distributivity of ``outer`` over ``inner``.

    ``outer(a, inner(b, c)) == inner(outer(a, b), outer(a, c))``
    """
    return outer(a, inner(b, c)) == inner(outer(a, b), outer(a, c))


def is_right_distributive(a: T, b: T, c: T, inner: BinaryOp, outer: BinaryOp) -> bool:
    """
    Check right distributivity of ``outer`` over ``inner``.

    ``outer(inner(b, c), a) == inner(outer(b, a), outer(c, a))``
    """
    return outer(inner(b, c), a) == inner(outer(b, a), outer(c, a))
