"""
Brute-Force Law Checkers

One checker per algebraic law. Each quantifies over every element (pair,
triple) of an enumerable set and raises the law's IntegrityViolation on the
first counterexample. Nothing is cached; every call re-verifies from scratch.
"""

from enum import Enum
from itertools import product
from typing import Any, Callable, Sequence

from loguru import logger

from .exceptions import (
    AssociativityViolation,
    ClosureViolation,
    CommutativityViolation,
    DistributivityViolation,
    IdentityViolation,
    IntegrityViolation,
    InverseViolation,
)
from .properties import (
    is_associative,
    is_commutative,
    is_identity,
    is_inverse,
    is_left_distributive,
    is_left_inverse,
    is_right_distributive,
)
from .sets import ElementSet

BinaryOp = Callable[[Any, Any], Any]


class Law(Enum):
    """Laws a structure can claim."""
    CLOSURE = "closure"
    ASSOCIATIVITY = "associativity"
    COMMUTATIVITY = "commutativity"
    IDENTITY = "identity"
    INVERSE = "inverse"
    LEFT_INVERSE = "left inverse"
    DISTRIBUTIVITY = "distributivity"
    SECONDARY_CLOSURE = "secondary closure"
    SECONDARY_ASSOCIATIVITY = "secondary associativity"
    MULTIPLICATIVE_GROUP = "multiplicative group"

    @property
    def needs_identity(self) -> bool:
        return self in (Law.IDENTITY, Law.INVERSE, Law.LEFT_INVERSE)


def _fail(violation: IntegrityViolation) -> None:
    logger.debug("Integrity check failed: {}", violation)
    raise violation


def check_closure(elements: ElementSet, op: BinaryOp, structure: str = "magma") -> None:
    """For all a, b: op(a, b) is a member of ``elements``."""
    members = elements.elements()
    for a, b in product(members, repeat=2):
        result = op(a, b)
        if not elements.contains(result):
            _fail(ClosureViolation(structure, (a, b), detail=f"result {result!r} is not a member"))


def check_associativity(elements: ElementSet, op: BinaryOp, structure: str = "semigroup") -> None:
    """For all a, b, c: op(op(a, b), c) == op(a, op(b, c))."""
    for a, b, c in product(elements.elements(), repeat=3):
        if not is_associative(a, b, c, op):
            _fail(AssociativityViolation(structure, (a, b, c)))


def check_commutativity(elements: ElementSet, op: BinaryOp, structure: str = "abelian group") -> None:
    """For all a, b: op(a, b) == op(b, a)."""
    for a, b in product(elements.elements(), repeat=2):
        if not is_commutative(a, b, op):
            _fail(CommutativityViolation(structure, (a, b)))


def check_identity(elements: ElementSet, identity: Any, op: BinaryOp,
                   structure: str = "monoid") -> None:
    """For all a: op(a, e) == a and op(e, a) == a."""
    for a in elements.elements():
        if not is_identity(a, identity, op):
            _fail(IdentityViolation(structure, (a,), detail=f"{identity!r} is not neutral"))


def check_inverse(elements: ElementSet, identity: Any, inverse: Callable[[Any], Any],
                  op: BinaryOp, structure: str = "group") -> None:
    """For all a: op(a, inverse(a)) == e."""
    for a in elements.elements():
        if not is_inverse(a, inverse(a), identity, op):
            _fail(InverseViolation(structure, (a,), detail=f"{inverse(a)!r} is not a right inverse"))


def check_left_inverse(elements: ElementSet, identity: Any, inverse: Callable[[Any], Any],
                       op: BinaryOp, structure: str = "group") -> None:
    """For all a: op(inverse(a), a) == e."""
    for a in elements.elements():
        if not is_left_inverse(a, inverse(a), identity, op):
            _fail(InverseViolation(structure, (a,), detail=f"{inverse(a)!r} is not a left inverse"))


def check_distributivity(elements: ElementSet, inner: BinaryOp, outer: BinaryOp,
                         structure: str = "ring") -> None:
    """
    For all a, b, c: ``outer`` distributes over ``inner`` from both sides.

    Args:
        elements: Enumerable set to quantify over
        inner: The operation distributed over (addition)
        outer: The distributing operation (multiplication)
        structure: Label used in the violation message
    """
    for a, b, c in product(elements.elements(), repeat=3):
        if not is_left_distributive(a, b, c, inner, outer):
            _fail(DistributivityViolation(structure, (a, b, c), detail="left distributivity"))
        if not is_right_distributive(a, b, c, inner, outer):
            _fail(DistributivityViolation(structure, (a, b, c), detail="right distributivity"))


def describe(laws: Sequence[Law]) -> str:
    return ", ".join(law.value for law in laws)
