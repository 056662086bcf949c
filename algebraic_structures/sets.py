"""
Element Sets

Implements the two kinds of sets an algebraic structure can be built over:

- SimpleSet: an explicit, finite, deduplicated collection. Enumerable, so the
  brute-force integrity checks can quantify over it.
- DefinedSet: membership decided by a predicate. Size is unknown and possibly
  infinite; only membership tests are supported.
"""

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from .exceptions import UnsupportedOperation


class ElementSet(ABC):
    """Common contract of enumerable and predicate-defined sets."""

    @abstractmethod
    def contains(self, element: Any) -> bool:
        """Check if an element is a member of the set."""

    @abstractmethod
    def elements(self) -> Tuple[Any, ...]:
        """Return the members of the set. Restartable, finite."""

    @abstractmethod
    def card(self) -> int:
        """Return the cardinality (size) of the set."""

    @abstractmethod
    def is_empty(self) -> bool:
        ...

    @abstractmethod
    def is_singleton(self) -> bool:
        ...

    @abstractmethod
    def is_infinite(self) -> bool:
        ...

    @abstractmethod
    def is_enumerable(self) -> bool:
        """True if ``elements()`` is defined for this set."""

    @abstractmethod
    def map(self, fn: Callable[[Any], Any]) -> "ElementSet":
        """Return the image of the set under ``fn``."""

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements())

    def __len__(self) -> int:
        return self.card()


def _same(a: Any, b: Any) -> bool:
    try:
        return bool(a == b)
    except ValueError as exc:
        raise UnsupportedOperation(
            f"Elements of type {type(a).__name__} do not support boolean equality; "
            "wrap numpy arrays in NumericArray"
        ) from exc


def _deduplicate(items: Iterable[Any]) -> Tuple[Tuple[Any, ...], Optional[frozenset]]:
    """
    Remove duplicates while keeping first-seen order.

    Returns:
        The unique elements and a frozenset for O(1) lookup, or None when some
        element is unhashable (membership then falls back to an equality scan)
    """
    unique = []
    seen = set()
    hashable = True
    for item in items:
        if hashable:
            try:
                if item in seen:
                    continue
                seen.add(item)
                unique.append(item)
                continue
            except TypeError:
                hashable = False
        if any(_same(item, u) for u in unique):
            continue
        unique.append(item)
    return tuple(unique), (frozenset(seen) if hashable else None)


class SimpleSet(ElementSet):
    """
    An explicitly enumerable, finite set of elements.

    Construct from any iterable (``SimpleSet([1, 2, 3])``) or from varargs
    via ``SimpleSet.of(1, 2, 3)``. Duplicates are dropped; order carries no
    meaning for equality.

    Unhashable elements are compared with ``==``, which must return a bool.
    Raw numpy arrays do not, and raise UnsupportedOperation; wrap them in
    NumericArray instead.
    """

    def __init__(self, elements: Iterable[Any] = ()):
        if isinstance(elements, SimpleSet):
            self._elements, self._lookup = elements._elements, elements._lookup
        else:
            self._elements, self._lookup = _deduplicate(elements)

    @classmethod
    def of(cls, *elements: Any) -> "SimpleSet":
        return cls(elements)

    def contains(self, element: Any) -> bool:
        if self._lookup is not None:
            try:
                return element in self._lookup
            except TypeError:
                pass
        return any(_same(element, e) for e in self._elements)

    def elements(self) -> Tuple[Any, ...]:
        return self._elements

    def card(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def is_singleton(self) -> bool:
        return len(self._elements) == 1

    def is_infinite(self) -> bool:
        return False

    def is_enumerable(self) -> bool:
        return True

    def issubset(self, other: ElementSet) -> bool:
        """Check if every element of this set is a member of ``other``."""
        return all(other.contains(e) for e in self._elements)

    def issuperset(self, other: ElementSet) -> bool:
        """Check if every element of ``other`` is a member of this set."""
        return all(self.contains(e) for e in other.elements())

    def union(self, other: ElementSet) -> ElementSet:
        if not other.is_enumerable():
            return DefinedSet(self.contains).union(other)
        return SimpleSet(self._elements + other.elements())

    def intersection(self, other: ElementSet) -> "SimpleSet":
        return SimpleSet(e for e in self._elements if other.contains(e))

    def difference(self, other: ElementSet) -> "SimpleSet":
        return SimpleSet(e for e in self._elements if not other.contains(e))

    def symmetric_difference(self, other: "SimpleSet") -> "SimpleSet":
        return self.union(other).difference(self.intersection(other))

    def cartesian_product(self, other: "SimpleSet") -> "SimpleSet":
        return SimpleSet((a, b) for a in self._elements for b in other.elements())

    def complement(self, universe: "SimpleSet") -> "SimpleSet":
        """Elements of ``universe`` that are not in this set."""
        return universe.difference(self)

    def without(self, element: Any) -> "SimpleSet":
        """This set with a single element removed."""
        return SimpleSet(e for e in self._elements if not _same(e, element))

    def map(self, fn: Callable[[Any], Any]) -> "SimpleSet":
        return SimpleSet(fn(e) for e in self._elements)

    def __eq__(self, other):
        if not isinstance(other, SimpleSet):
            return NotImplemented
        return self.card() == other.card() and self.issubset(other)

    def __hash__(self):
        if self._lookup is not None:
            return hash(self._lookup)
        return hash(len(self._elements))

    def __repr__(self):
        return f"SimpleSet({{{', '.join(repr(e) for e in self._elements)}}})"


class DefinedSet(ElementSet):
    """
    A set whose membership is decided by a predicate.

    The predicate must be total and pure over the element domain. Since the
    members are not statically known the set cannot be enumerated, mapped,
    or counted (unless it was declared empty or singleton).

    Attributes:
        predicate: Membership function ``T -> bool``
        name: Optional label used in repr and error messages
    """

    def __init__(self, predicate: Callable[[Any], bool], is_empty: bool = False,
                 is_singleton: bool = False, name: Optional[str] = None):
        if is_empty and is_singleton:
            raise ValueError("A set cannot be both empty and a singleton")
        self.predicate = predicate
        self.name = name
        self._is_empty = is_empty
        self._is_singleton = is_singleton

    def contains(self, element: Any) -> bool:
        return bool(self.predicate(element))

    def elements(self) -> Tuple[Any, ...]:
        raise UnsupportedOperation(
            "Cannot enumerate a set whose elements are defined by a predicate"
        )

    def card(self) -> int:
        if self._is_empty:
            return 0
        if self._is_singleton:
            return 1
        raise UnsupportedOperation(
            "Cannot determine the cardinality of a set whose elements are not statically defined"
        )

    def is_empty(self) -> bool:
        return self._is_empty

    def is_singleton(self) -> bool:
        return self._is_singleton

    def is_infinite(self) -> bool:
        return not (self._is_empty or self._is_singleton)

    def is_enumerable(self) -> bool:
        return False

    def issuperset(self, other: ElementSet) -> bool:
        """Check if every element of the enumerable set ``other`` satisfies the predicate."""
        return all(self.contains(e) for e in other.elements())

    def map(self, fn: Callable[[Any], Any]) -> ElementSet:
        raise UnsupportedOperation(
            "Cannot map a set whose elements are not statically defined"
        )

    def map_if_contains(self, element: Any, fn: Callable[[Any], Any]) -> Optional[Any]:
        """Apply ``fn`` to ``element`` if it is a member, else return None."""
        return fn(element) if self.contains(element) else None

    def union(self, other: ElementSet) -> "DefinedSet":
        return DefinedSet(lambda x: self.contains(x) or other.contains(x))

    def intersection(self, other: ElementSet) -> ElementSet:
        if other.is_enumerable():
            return SimpleSet(e for e in other.elements() if self.contains(e))
        return DefinedSet(lambda x: self.contains(x) and other.contains(x))

    def difference(self, other: ElementSet) -> "DefinedSet":
        return DefinedSet(lambda x: self.contains(x) and not other.contains(x))

    def without(self, element: Any) -> "DefinedSet":
        return DefinedSet(lambda x: self.contains(x) and not _same(x, element), name=self.name)

    def restrict(self, candidates: Iterable[Any]) -> SimpleSet:
        """The finite set of ``candidates`` that are members of this set."""
        return SimpleSet(c for c in candidates if self.contains(c))

    def __repr__(self):
        return f"DefinedSet({self.name or getattr(self.predicate, '__name__', 'predicate')})"


def as_element_set(source: Any = None) -> ElementSet:
    """
    Normalise any accepted element source to an ElementSet.

    Args:
        source: None (empty set), an ElementSet, a membership predicate,
                or any iterable of elements

    Returns:
        The canonical ElementSet for the source
    """
    if source is None:
        return SimpleSet()
    if isinstance(source, ElementSet):
        return source
    if callable(source) and not hasattr(source, "__iter__"):
        return DefinedSet(source)
    return SimpleSet(source)


def element_set(*elements: Any) -> SimpleSet:
    """Build a SimpleSet from varargs."""
    return SimpleSet(elements)


def _is_number(x: Any, kind) -> bool:
    return isinstance(x, kind) and not isinstance(x, bool)


NATURAL = DefinedSet(lambda x: _is_number(x, numbers.Integral) and x >= 0, name="NATURAL")
INTEGERS = DefinedSet(lambda x: _is_number(x, numbers.Integral), name="INTEGERS")
REAL_NUMBERS = DefinedSet(
    lambda x: _is_number(x, numbers.Real) and math.isfinite(x), name="REAL_NUMBERS"
)
NONZERO_REAL_NUMBERS = DefinedSet(
    lambda x: REAL_NUMBERS.contains(x) and x != 0, name="NONZERO_REAL_NUMBERS"
)
COMPLEX_NUMBERS = DefinedSet(lambda x: _is_number(x, numbers.Complex), name="COMPLEX_NUMBERS")
