"""
Structure Specifications

A structure is described by composition rather than a class hierarchy: a
StructureSpec holds an element set, the operations (OpSet), and a kind that
selects which laws apply. ``check`` runs those laws in order and fails fast.

Check order per kind:
    MAGMA          closure
    SEMIGROUP      closure, associativity
    MONOID         closure, associativity, identity
    GROUP          closure, associativity, identity, inverse
    ABELIAN_GROUP  closure, commutativity, associativity, identity, inverse
    RING           abelian group laws, secondary closure, secondary
                   associativity, distributivity
    FIELD          abelian group laws, multiplicative group over the
                   nonzero elements, distributivity
Identity membership is verified before any law when the kind has an identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from loguru import logger

from . import constants
from .exceptions import IdentityNotMember, UnsupportedOnInfiniteSet
from .laws import (
    Law,
    check_associativity,
    check_closure,
    check_commutativity,
    check_distributivity,
    check_identity,
    check_inverse,
    check_left_inverse,
    describe,
)
from .sets import ElementSet


class _Missing:
    """Marks an operation slot that was not supplied."""

    def __repr__(self):
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class OpSet:
    """
    The operations of a structure.

    Attributes:
        operation: Primary binary operation (addition for rings and fields)
        identity: Identity of the primary operation
        inverse: Inverse function of the primary operation
        secondary: Second binary operation (multiplication)
        secondary_identity: Identity of the secondary operation
        secondary_inverse: Inverse function of the secondary operation
    """
    operation: Callable[[Any, Any], Any]
    identity: Any = MISSING
    inverse: Any = MISSING
    secondary: Any = MISSING
    secondary_identity: Any = MISSING
    secondary_inverse: Any = MISSING


class StructureKind(Enum):
    MAGMA = "magma"
    SEMIGROUP = "semigroup"
    MONOID = "monoid"
    GROUP = "group"
    ABELIAN_GROUP = "abelian group"
    RING = "ring"
    FIELD = "field"

    @property
    def laws(self) -> Tuple[Law, ...]:
        return KIND_LAWS[self]

    @property
    def required_ops(self) -> Tuple[str, ...]:
        return KIND_REQUIRED_OPS[self]


_ABELIAN_LAWS = (Law.CLOSURE, Law.COMMUTATIVITY, Law.ASSOCIATIVITY, Law.IDENTITY, Law.INVERSE)

KIND_LAWS: Dict[StructureKind, Tuple[Law, ...]] = {
    StructureKind.MAGMA: (Law.CLOSURE,),
    StructureKind.SEMIGROUP: (Law.CLOSURE, Law.ASSOCIATIVITY),
    StructureKind.MONOID: (Law.CLOSURE, Law.ASSOCIATIVITY, Law.IDENTITY),
    StructureKind.GROUP: (Law.CLOSURE, Law.ASSOCIATIVITY, Law.IDENTITY, Law.INVERSE),
    StructureKind.ABELIAN_GROUP: _ABELIAN_LAWS,
    StructureKind.RING: _ABELIAN_LAWS + (
        Law.SECONDARY_CLOSURE, Law.SECONDARY_ASSOCIATIVITY, Law.DISTRIBUTIVITY,
    ),
    StructureKind.FIELD: _ABELIAN_LAWS + (Law.MULTIPLICATIVE_GROUP, Law.DISTRIBUTIVITY),
}

KIND_REQUIRED_OPS: Dict[StructureKind, Tuple[str, ...]] = {
    StructureKind.MAGMA: (),
    StructureKind.SEMIGROUP: (),
    StructureKind.MONOID: ("identity",),
    StructureKind.GROUP: ("identity", "inverse"),
    StructureKind.ABELIAN_GROUP: ("identity", "inverse"),
    StructureKind.RING: ("identity", "inverse", "secondary"),
    StructureKind.FIELD: ("identity", "inverse", "secondary",
                          "secondary_identity", "secondary_inverse"),
}

LAW_REQUIRED_OPS: Dict[Law, Tuple[str, ...]] = {
    Law.CLOSURE: (),
    Law.ASSOCIATIVITY: (),
    Law.COMMUTATIVITY: (),
    Law.IDENTITY: ("identity",),
    Law.INVERSE: ("identity", "inverse"),
    Law.LEFT_INVERSE: ("identity", "inverse"),
    Law.DISTRIBUTIVITY: ("secondary",),
    Law.SECONDARY_CLOSURE: ("secondary",),
    Law.SECONDARY_ASSOCIATIVITY: ("secondary",),
    Law.MULTIPLICATIVE_GROUP: ("identity", "secondary", "secondary_identity", "secondary_inverse"),
}


@dataclass(frozen=True)
class StructureSpec:
    """
    An element set, its operations, and the kind selecting the laws.

    Immutable after construction; ``check`` only reads it.
    """
    elements: ElementSet
    ops: OpSet
    kind: StructureKind
    name: Optional[str] = None

    def __post_init__(self):
        missing = [op for op in self.kind.required_ops if getattr(self.ops, op) is MISSING]
        if missing:
            raise ValueError(f"A {self.kind.value} requires: {', '.join(missing)}")

    @property
    def label(self) -> str:
        return self.name or self.kind.value

    def multiplicative_spec(self) -> "StructureSpec":
        """
        The abelian group formed by the secondary operation over
        ``elements \\ {identity}``. Only defined for fields.
        """
        if self.kind is not StructureKind.FIELD:
            raise ValueError(f"A {self.kind.value} has no multiplicative group")
        return StructureSpec(
            elements=self.elements.without(self.ops.identity),
            ops=OpSet(
                operation=self.ops.secondary,
                identity=self.ops.secondary_identity,
                inverse=self.ops.secondary_inverse,
            ),
            kind=StructureKind.ABELIAN_GROUP,
            name=f"multiplicative group of the {self.label}",
        )


def _run_law(spec: StructureSpec, law: Law) -> None:
    elements, ops, label = spec.elements, spec.ops, spec.label
    if law is Law.CLOSURE:
        check_closure(elements, ops.operation, label)
    elif law is Law.ASSOCIATIVITY:
        check_associativity(elements, ops.operation, label)
    elif law is Law.COMMUTATIVITY:
        check_commutativity(elements, ops.operation, label)
    elif law is Law.IDENTITY:
        check_identity(elements, ops.identity, ops.operation, label)
    elif law is Law.INVERSE:
        check_inverse(elements, ops.identity, ops.inverse, ops.operation, label)
    elif law is Law.LEFT_INVERSE:
        check_left_inverse(elements, ops.identity, ops.inverse, ops.operation, label)
    elif law is Law.SECONDARY_CLOSURE:
        check_closure(elements, ops.secondary, label)
    elif law is Law.SECONDARY_ASSOCIATIVITY:
        check_associativity(elements, ops.secondary, label)
    elif law is Law.DISTRIBUTIVITY:
        check_distributivity(elements, ops.operation, ops.secondary, label)
    elif law is Law.MULTIPLICATIVE_GROUP:
        check(spec.multiplicative_spec())
    else:
        raise ValueError(f"Unknown law: {law}")


def require_ops(spec: StructureSpec, laws: Sequence[Law]) -> None:
    """Raise ValueError if a law needs an operation the spec does not supply."""
    for law in laws:
        missing = [op for op in LAW_REQUIRED_OPS[law] if getattr(spec.ops, op) is MISSING]
        if missing:
            raise ValueError(f"Checking {law.value} on the {spec.label} requires: {', '.join(missing)}")


def check_identity_membership(spec: StructureSpec, laws: Sequence[Law]) -> None:
    """Verify the identities the given laws rely on are members of the set."""
    if any(law.needs_identity for law in laws) and not spec.elements.contains(spec.ops.identity):
        raise IdentityNotMember(spec.label, (spec.ops.identity,))
    if Law.MULTIPLICATIVE_GROUP in laws and not spec.elements.contains(spec.ops.secondary_identity):
        raise IdentityNotMember(spec.label, (spec.ops.secondary_identity,),
                                detail="multiplicative identity")


def check(spec: StructureSpec, laws: Optional[Sequence[Law]] = None) -> None:
    """
    Verify by brute force that the laws of a structure hold.

    Args:
        spec: The structure to verify
        laws: Laws to check, in order. Defaults to the laws of ``spec.kind``

    Raises:
        ValueError: If a law needs an operation the spec does not supply
        UnsupportedOnInfiniteSet: If the element set is predicate-defined
        IntegrityViolation: On the first counterexample found
    """
    laws = tuple(spec.kind.laws if laws is None else laws)
    require_ops(spec, laws)
    if not spec.elements.is_enumerable():
        raise UnsupportedOnInfiniteSet(spec.label)

    card = spec.elements.card()
    if card > constants.LARGE_SET_WARNING_CARDINALITY:
        logger.warning("Checking the {} over {} elements; this may take a while", spec.label, card)

    logger.debug("Checking {} over {} elements: {}", spec.label, card, describe(laws))
    check_identity_membership(spec, laws)
    for law in laws:
        _run_law(spec, law)
    logger.debug("All laws hold for the {}", spec.label)
