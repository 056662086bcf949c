"""
Structure Factory

Builders that wrap numeric containers (NumericArray vectors and matrices) as
algebra elements. The identity is always passed or built explicitly from the
requested shape and dtype; no runtime type switch selects it.
"""

from typing import Any, Callable, Optional, Tuple, Union

from loguru import logger

from . import constants
from .algebra import AbelianGroup
from .numerics import NumericArray
from .sets import DefinedSet, SimpleSet

Shape = Union[int, Tuple[int, ...]]


def _add(a: NumericArray, b: NumericArray) -> NumericArray:
    return a + b


def _negate(a: NumericArray) -> NumericArray:
    return -a


def _matmul(a: NumericArray, b: NumericArray) -> NumericArray:
    return a @ b


def _invert(a: NumericArray) -> NumericArray:
    return a.inverse()


def addition_group(shape: Shape, is_member: Callable[[NumericArray], bool],
                   neutral: Optional[NumericArray] = None,
                   dtype=constants.DEFAULT_DTYPE) -> AbelianGroup:
    """
    Create an abelian group of arrays under elementwise addition.

    Args:
        shape: Shape of the member arrays
        is_member: Predicate deciding membership
        neutral: Explicit zero element. Defaults to the zero array of ``shape``
        dtype: dtype of the default zero array

    Returns:
        An AbelianGroup over a predicate-defined set (membership tests only)
    """
    identity = neutral if neutral is not None else NumericArray.zeros(shape, dtype=dtype)
    logger.debug("Building addition group of arrays with shape {}", identity.shape)
    return AbelianGroup(
        identity, _negate, _add,
        DefinedSet(is_member, name=f"arrays of shape {identity.shape}"),
        name=f"additive group of {identity.shape} arrays",
    )


def general_linear_group(n: int, dtype=constants.DEFAULT_DTYPE) -> AbelianGroup:
    """
    Create GL(n): the invertible n×n matrices under matrix multiplication.

    Membership is "is an invertible n×n matrix". The set is predicate-defined,
    so commutativity is claimed but never verified; it only holds for n = 1.

    Args:
        n: Size of the square matrices
        dtype: dtype of the identity matrix
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    def is_invertible_square(m: Any) -> bool:
        return isinstance(m, NumericArray) and m.shape == (n, n) and m.is_invertible()

    return AbelianGroup(
        NumericArray.identity(n, dtype=dtype), _invert, _matmul,
        DefinedSet(is_invertible_square, name=f"invertible {n}x{n} matrices"),
        name=f"GL({n})",
    )


def finite_addition_group(*elements: NumericArray) -> AbelianGroup:
    """
    An addition group over an explicit sample of arrays, so the brute-force
    integrity checks can run. The sample must contain the zero array.
    """
    members = SimpleSet(elements)
    if members.is_empty():
        raise ValueError("At least one array is required to determine the shape")
    shape = members.elements()[0].shape
    return AbelianGroup(
        NumericArray.zeros(shape), _negate, _add, members,
        name=f"additive group of {shape} arrays",
    )
