"""
Algebraic Structures - Brute-Force Verification of Algebraic Laws

Magma, semigroup, monoid, group, abelian group, ring and field over finite or
predicate-defined element sets with pluggable operations, together with an
integrity engine that verifies the laws each structure claims by quantifying
over every element.

Logging goes through loguru and is disabled by default; call
``logger.enable("algebraic_structures")`` to see check progress.
"""

__version__ = "0.1.0"

from loguru import logger

from .constants import LOGGER_NAME
from .exceptions import (
    AlgebraError,
    AssociativityViolation,
    ClosureViolation,
    CommutativityViolation,
    DistributivityViolation,
    IdentityNotMember,
    IdentityViolation,
    IntegrityViolation,
    InverseViolation,
    NotAMember,
    UnsupportedOnInfiniteSet,
    UnsupportedOperation,
)
from .sets import (
    COMPLEX_NUMBERS,
    INTEGERS,
    NATURAL,
    NONZERO_REAL_NUMBERS,
    REAL_NUMBERS,
    DefinedSet,
    ElementSet,
    SimpleSet,
    as_element_set,
    element_set,
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
from .laws import Law
from .structures import OpSet, StructureKind, StructureSpec, check
from .algebra import (
    AbelianGroup,
    Algebra,
    Field,
    Group,
    Magma,
    Monoid,
    Ring,
    Semigroup,
)
from .numerics import NumericArray
from .factory import addition_group, finite_addition_group, general_linear_group
from . import registry

logger.disable(LOGGER_NAME)

__all__ = [
    "AlgebraError",
    "AssociativityViolation",
    "ClosureViolation",
    "CommutativityViolation",
    "DistributivityViolation",
    "IdentityNotMember",
    "IdentityViolation",
    "IntegrityViolation",
    "InverseViolation",
    "NotAMember",
    "UnsupportedOnInfiniteSet",
    "UnsupportedOperation",
    "COMPLEX_NUMBERS",
    "INTEGERS",
    "NATURAL",
    "NONZERO_REAL_NUMBERS",
    "REAL_NUMBERS",
    "DefinedSet",
    "ElementSet",
    "SimpleSet",
    "as_element_set",
    "element_set",
    "is_associative",
    "is_commutative",
    "is_identity",
    "is_inverse",
    "is_left_distributive",
    "is_left_inverse",
    "is_right_distributive",
    "Law",
    "OpSet",
    "StructureKind",
    "StructureSpec",
    "check",
    "AbelianGroup",
    "Algebra",
    "Field",
    "Group",
    "Magma",
    "Monoid",
    "Ring",
    "Semigroup",
    "NumericArray",
    "addition_group",
    "finite_addition_group",
    "general_linear_group",
    "registry",
]
