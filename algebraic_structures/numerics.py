"""
Numeric Element Type

An immutable, hashable value wrapper around a numpy array so that vectors and
matrices can be used as algebra elements: the structures only need value
equality, hashing for set membership, and the closure-producing operations.
"""

from typing import Any, Iterable, Tuple, Union

import numpy as np

from . import constants
from .exceptions import UnsupportedOperation


class NumericArray:
    """
    An immutable numeric vector or matrix with value semantics.

    Attributes:
        shape: Shape of the underlying array
    """

    __slots__ = ("_data",)

    def __init__(self, data: Union[Iterable[Any], np.ndarray], dtype=None):
        array = np.array(data, dtype=dtype, copy=True)
        array.setflags(write=False)
        self._data = array

    @classmethod
    def zeros(cls, shape: Union[int, Tuple[int, ...]], dtype=constants.DEFAULT_DTYPE) -> "NumericArray":
        return cls(np.zeros(shape, dtype=dtype))

    @classmethod
    def identity(cls, n: int, dtype=constants.DEFAULT_DTYPE) -> "NumericArray":
        return cls(np.eye(n, dtype=dtype))

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._data.shape

    @property
    def dtype(self):
        return self._data.dtype

    def to_numpy(self) -> np.ndarray:
        """A writable copy of the underlying array."""
        return self._data.copy()

    def _is_boolean(self) -> bool:
        return self._data.dtype == np.bool_

    def _coerce(self, other: Any) -> np.ndarray:
        if isinstance(other, NumericArray):
            if other.shape != self.shape:
                raise ValueError(f"Shape mismatch: {self.shape} vs {other.shape}")
            return other._data
        return np.asarray(other)

    def __add__(self, other: Any) -> "NumericArray":
        return NumericArray(self._data + self._coerce(other))

    def __sub__(self, other: Any) -> "NumericArray":
        if self._is_boolean():
            raise UnsupportedOperation("Cannot subtract boolean arrays")
        return NumericArray(self._data - self._coerce(other))

    def __neg__(self) -> "NumericArray":
        if self._is_boolean():
            raise UnsupportedOperation("Cannot negate a boolean array")
        return NumericArray(-self._data)

    def __mul__(self, other: Any) -> "NumericArray":
        return NumericArray(self._data * self._coerce(other))

    __rmul__ = __mul__

    def __matmul__(self, other: "NumericArray") -> "NumericArray":
        if not isinstance(other, NumericArray):
            return NotImplemented
        if self._data.ndim != 2 or other._data.ndim != 2 or self.shape[1] != other.shape[0]:
            raise ValueError(f"Cannot multiply matrices of shape {self.shape} and {other.shape}")
        return NumericArray(self._data @ other._data)

    def is_square(self) -> bool:
        return self._data.ndim == 2 and self.shape[0] == self.shape[1]

    def determinant(self) -> float:
        if not self.is_square():
            raise UnsupportedOperation(f"Determinant is undefined for shape {self.shape}")
        return float(np.linalg.det(self._data.astype(np.float64)))

    def is_invertible(self) -> bool:
        return self.is_square() and abs(self.determinant()) > constants.INVERTIBILITY_TOLERANCE

    def inverse(self) -> "NumericArray":
        if not self.is_invertible():
            raise UnsupportedOperation("Matrix does not have an inverse, since the determinant is 0")
        return NumericArray(np.linalg.inv(self._data.astype(np.float64)))

    def __eq__(self, other):
        if not isinstance(other, NumericArray):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        return hash((self.shape, tuple(self._data.ravel().tolist())))

    def __repr__(self):
        return f"NumericArray({self._data.tolist()!r})"
