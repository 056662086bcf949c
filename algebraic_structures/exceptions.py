"""
Error Taxonomy

Every failure is a precondition or law violation raised synchronously to the
caller. Integrity violations are raised on the first counterexample found and
carry it as ``witness``.
"""

from typing import Any, Optional, Tuple


class AlgebraError(ValueError):
    """Base class for all errors raised by this package."""


class NotAMember(AlgebraError):
    """An operand is not a member of the structure's element set."""

    def __init__(self, element: Any, structure: str = "set"):
        self.element = element
        self.structure = structure
        super().__init__(f"{element!r} is not a member of the {structure}")


class UnsupportedOnInfiniteSet(AlgebraError):
    """A brute-force check was requested over a predicate-defined set."""

    def __init__(self, structure: str = "set"):
        self.structure = structure
        super().__init__(
            f"Cannot check the integrity of the {structure}: "
            "its elements are defined by a predicate and cannot be enumerated"
        )


class UnsupportedOperation(AlgebraError):
    """The request has no meaning for this set or element type."""


class IntegrityViolation(AlgebraError):
    """
    A law claimed by a structure does not hold.

    Attributes:
        law: Name of the violated law
        structure: Label of the structure being checked
        witness: The counterexample (elements that break the law)
    """

    law = "integrity"

    def __init__(self, structure: str, witness: Tuple[Any, ...] = (),
                 detail: Optional[str] = None):
        self.structure = structure
        self.witness = tuple(witness)
        message = f"{self.law} does not hold in the {structure}"
        if self.witness:
            message += f" (counterexample: {', '.join(repr(w) for w in self.witness)})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class IdentityNotMember(IntegrityViolation):
    law = "identity membership"


class ClosureViolation(IntegrityViolation):
    law = "closure"


class AssociativityViolation(IntegrityViolation):
    law = "associativity"


class CommutativityViolation(IntegrityViolation):
    law = "commutativity"


class IdentityViolation(IntegrityViolation):
    law = "identity"


class InverseViolation(IntegrityViolation):
    law = "inverse"


class DistributivityViolation(IntegrityViolation):
    law = "distributivity"
