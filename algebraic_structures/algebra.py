"""
Algebraic Structures

User-facing structures from magma through field. Each one composes a
StructureSpec (element set + operations + kind); the kind alone decides which
laws ``check_integrity`` verifies, so there is no chain of overridden checks.

Every constructor accepts its elements as:
    - nothing                           Magma(op)
    - varargs                           Magma(op, 0, 1, 2)
    - a list, set, range or iterator    Magma(op, range(3))
    - a prebuilt ElementSet             Magma(op, SimpleSet([0, 1, 2]))
A single predicate callable is accepted too and becomes a DefinedSet, and a
single None means the empty set. Any other single argument, a tuple included,
is one element.

Integrity is never checked automatically. Operations guard membership of
their operands but do not re-verify the laws.
"""

from collections import abc
from typing import Any, Callable, Iterator, Optional, Tuple

from loguru import logger

from .exceptions import (
    IntegrityViolation,
    NotAMember,
    UnsupportedOnInfiniteSet,
    UnsupportedOperation,
)
from .laws import Law
from .sets import ElementSet, SimpleSet, as_element_set
from .structures import (
    MISSING,
    OpSet,
    StructureKind,
    StructureSpec,
    check,
    check_identity_membership,
)

BinaryOp = Callable[[Any, Any], Any]
UnaryOp = Callable[[Any], Any]

# single arguments unpacked as the element collection
_COLLECTIONS = (list, set, frozenset, range, abc.Iterator)


def _normalise(elements: Tuple[Any, ...]) -> ElementSet:
    """
    Collapse the accepted element forms to one ElementSet.

    A lone tuple is an element, not a collection: varargs already arrive as
    a tuple, so ``Group(e, inv, op, (0, 1, 2))`` is the singleton {(0, 1, 2)}.
    """
    if len(elements) == 1:
        (single,) = elements
        if single is None or isinstance(single, ElementSet) or callable(single):
            return as_element_set(single)
        if isinstance(single, _COLLECTIONS):
            return SimpleSet(single)
    return SimpleSet(elements)


class Algebra:
    """
    Base of all structures: an element set with a ``check_integrity`` contract.

    Attributes:
        spec: The composed StructureSpec (immutable)
    """

    kind: StructureKind = StructureKind.MAGMA

    def __init__(self, ops: OpSet, elements: Tuple[Any, ...] = (), name: Optional[str] = None):
        self.spec = StructureSpec(_normalise(elements), ops, self.kind, name)

    @property
    def element_set(self) -> ElementSet:
        return self.spec.elements

    @property
    def label(self) -> str:
        return self.spec.label

    def contains(self, element: Any) -> bool:
        return self.spec.elements.contains(element)

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def elements(self) -> Tuple[Any, ...]:
        return self.spec.elements.elements()

    def card(self) -> int:
        return self.spec.elements.card()

    def __len__(self) -> int:
        return self.card()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements())

    def is_empty(self) -> bool:
        return self.spec.elements.is_empty()

    def is_infinite(self) -> bool:
        return self.spec.elements.is_infinite()

    def check_integrity(self) -> None:
        """
        Verify every law of this structure over its elements.

        Raises:
            UnsupportedOnInfiniteSet: If the elements are predicate-defined
            IntegrityViolation: The first law found not to hold
        """
        check(self.spec)

    def is_valid(self) -> bool:
        """Like ``check_integrity`` but returns False instead of raising a violation."""
        try:
            self.check_integrity()
        except IntegrityViolation:
            return False
        return True

    def _require_member(self, *operands: Any) -> None:
        for operand in operands:
            if not self.contains(operand):
                raise NotAMember(operand, self.label)

    def apply(self, a: Any, b: Any) -> Any:
        """
        Apply the (primary) operation to two members.

        Raises:
            NotAMember: If either operand is not in the set
        """
        self._require_member(a, b)
        return self.spec.ops.operation(a, b)

    def __getitem__(self, operands: Tuple[Any, Any]) -> Any:
        a, b = operands
        return self.apply(a, b)

    def identity(self) -> Any:
        if self.spec.ops.identity is MISSING:
            raise UnsupportedOperation(f"A {self.kind.value} has no identity element")
        return self.spec.ops.identity

    def inverse(self, element: Any) -> Any:
        """
        Get the inverse of a member.

        Raises:
            NotAMember: If the element is not in the set
            UnsupportedOperation: If the structure has no inverses
        """
        if self.spec.ops.inverse is MISSING:
            raise UnsupportedOperation(f"A {self.kind.value} has no inverse elements")
        self._require_member(element)
        return self.spec.ops.inverse(element)

    def __eq__(self, other):
        if not isinstance(other, Algebra):
            return NotImplemented
        return self.kind is other.kind and self.element_set == other.element_set

    def __hash__(self):
        return hash((self.kind, self.element_set))

    def __repr__(self):
        return f"{type(self).__name__}({self.element_set!r})"


class Magma(Algebra):
    """A set closed under one binary operation."""

    kind = StructureKind.MAGMA

    def __init__(self, operation: BinaryOp, *elements: Any, name: Optional[str] = None):
        super().__init__(OpSet(operation), elements, name)


class Semigroup(Algebra):
    """A magma whose operation is associative."""

    kind = StructureKind.SEMIGROUP

    def __init__(self, operation: BinaryOp, *elements: Any, name: Optional[str] = None):
        super().__init__(OpSet(operation), elements, name)


class Monoid(Algebra):
    """A semigroup with an identity element."""

    kind = StructureKind.MONOID

    def __init__(self, identity: Any, operation: BinaryOp, *elements: Any,
                 name: Optional[str] = None):
        super().__init__(OpSet(operation, identity=identity), elements, name)


class Group(Algebra):
    """
    A monoid where every element has an inverse.

    Only the right-inverse law ``op(a, inverse(a)) == identity`` is part of
    the integrity check. Use ``check(group.spec, laws=...)`` with
    ``Law.LEFT_INVERSE`` to verify the other side as well.
    """

    kind = StructureKind.GROUP

    def __init__(self, identity: Any, inverse: UnaryOp, operation: BinaryOp, *elements: Any,
                 name: Optional[str] = None):
        super().__init__(OpSet(operation, identity=identity, inverse=inverse), elements, name)


class AbelianGroup(Algebra):
    """A group whose operation is commutative."""

    kind = StructureKind.ABELIAN_GROUP

    def __init__(self, identity: Any, inverse: UnaryOp, operation: BinaryOp, *elements: Any,
                 name: Optional[str] = None):
        super().__init__(OpSet(operation, identity=identity, inverse=inverse), elements, name)


class Ring(Algebra):
    """
    An abelian group under addition with a second, associative operation
    (multiplication) that distributes over addition from both sides.
    """

    kind = StructureKind.RING

    def __init__(self, identity: Any, inverse: UnaryOp, addition: BinaryOp,
                 multiplication: BinaryOp, *elements: Any, name: Optional[str] = None):
        ops = OpSet(addition, identity=identity, inverse=inverse, secondary=multiplication)
        super().__init__(ops, elements, name)

    def add(self, a: Any, b: Any) -> Any:
        return self.apply(a, b)

    def multiply(self, a: Any, b: Any) -> Any:
        self._require_member(a, b)
        return self.spec.ops.secondary(a, b)

    primary = add
    secondary = multiply


class Field(Algebra):
    """
    A ring whose nonzero elements form an abelian group under multiplication.

    The multiplicative group over ``elements \\ {additive_identity}`` is built
    once, at construction, and is available as ``multiplicative_group``.
    """

    kind = StructureKind.FIELD

    def __init__(self, additive_identity: Any, multiplicative_identity: Any,
                 additive_inverse: UnaryOp, multiplicative_inverse: UnaryOp,
                 addition: BinaryOp, multiplication: BinaryOp, *elements: Any,
                 name: Optional[str] = None):
        ops = OpSet(
            addition,
            identity=additive_identity,
            inverse=additive_inverse,
            secondary=multiplication,
            secondary_identity=multiplicative_identity,
            secondary_inverse=multiplicative_inverse,
        )
        super().__init__(ops, elements, name)

        derived = self.spec.multiplicative_spec()
        self.multiplicative_group = AbelianGroup(
            multiplicative_identity, multiplicative_inverse, multiplication,
            derived.elements, name=derived.name,
        )
        logger.debug("Derived {} over {!r}", derived.name, derived.elements)

    def check_integrity(self) -> None:
        """
        Verify the additive abelian group, then the multiplicative group's own
        integrity, then distributivity of multiplication over addition.
        """
        if not self.element_set.is_enumerable():
            raise UnsupportedOnInfiniteSet(self.label)
        laws = self.kind.laws
        split = laws.index(Law.MULTIPLICATIVE_GROUP)
        check_identity_membership(self.spec, laws)
        check(self.spec, laws=laws[:split])
        self.multiplicative_group.check_integrity()
        check(self.spec, laws=laws[split + 1:])

    def add(self, a: Any, b: Any) -> Any:
        return self.apply(a, b)

    def multiply(self, a: Any, b: Any) -> Any:
        self._require_member(a, b)
        return self.spec.ops.secondary(a, b)

    def additive_identity(self) -> Any:
        return self.spec.ops.identity

    def multiplicative_identity(self) -> Any:
        return self.spec.ops.secondary_identity

    def additive_inverse(self, element: Any) -> Any:
        return self.inverse(element)

    def multiplicative_inverse(self, element: Any) -> Any:
        """
        Raises:
            NotAMember: If the element is not a nonzero member of the field
        """
        if not self.multiplicative_group.contains(element):
            raise NotAMember(element, self.multiplicative_group.label)
        return self.spec.ops.secondary_inverse(element)
