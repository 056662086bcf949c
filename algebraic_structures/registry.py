"""
Canonical Structures

A small registry of well-known structures. Each accessor builds its structure
on first use and returns the same instance afterwards; nothing is created at
import time and nothing is mutable.

Predicate-defined (membership only):
    integers(), real_addition(), real_multiplication(), complex_addition()
Finite (integrity can be checked):
    integers_mod_addition(n), integers_mod_multiplication(p),
    integers_mod_ring(n), prime_field(p), boolean_field()
"""

from functools import lru_cache
from operator import add, and_, mul, neg, xor

from .algebra import AbelianGroup, Field, Ring
from .sets import COMPLEX_NUMBERS, INTEGERS, NONZERO_REAL_NUMBERS, REAL_NUMBERS


def _is_prime(p: int) -> bool:
    if p < 2:
        return False
    return all(p % d for d in range(2, int(p ** 0.5) + 1))


def _require_modulus(n: int) -> None:
    if n < 1:
        raise ValueError(f"Modulus must be >= 1, got {n}")


def _require_prime(p: int) -> None:
    if not _is_prime(p):
        raise ValueError(f"{p} is not prime")


@lru_cache(maxsize=None)
def integers() -> AbelianGroup:
    """ℤ under addition."""
    return AbelianGroup(0, neg, add, INTEGERS, name="integers under addition")


@lru_cache(maxsize=None)
def real_addition() -> AbelianGroup:
    """ℝ under addition."""
    return AbelianGroup(0.0, neg, add, REAL_NUMBERS, name="real numbers under addition")


@lru_cache(maxsize=None)
def real_multiplication() -> AbelianGroup:
    """ℝ \\ {0} under multiplication."""
    return AbelianGroup(
        1.0, lambda a: 1.0 / a, mul, NONZERO_REAL_NUMBERS,
        name="nonzero real numbers under multiplication",
    )


@lru_cache(maxsize=None)
def complex_addition() -> AbelianGroup:
    """ℂ under addition."""
    return AbelianGroup(0j, neg, add, COMPLEX_NUMBERS, name="complex numbers under addition")


@lru_cache(maxsize=None)
def integers_mod_addition(n: int) -> AbelianGroup:
    """
    ℤₙ = {0, ..., n-1} under addition mod n.

    Args:
        n: The modulus, n >= 1
    """
    _require_modulus(n)
    return AbelianGroup(
        0, lambda a: (-a) % n, lambda a, b: (a + b) % n, range(n),
        name=f"integers mod {n} under addition",
    )


@lru_cache(maxsize=None)
def integers_mod_multiplication(p: int) -> AbelianGroup:
    """
    (ℤ/pℤ)* = {1, ..., p-1} under multiplication mod p, for prime p.

    Inverses are computed with Fermat's little theorem: a⁻¹ = a^(p-2) mod p.
    """
    _require_prime(p)
    return AbelianGroup(
        1, lambda a: pow(a, p - 2, p), lambda a, b: (a * b) % p, range(1, p),
        name=f"nonzero integers mod {p} under multiplication",
    )


@lru_cache(maxsize=None)
def integers_mod_ring(n: int) -> Ring:
    """ℤₙ with addition and multiplication mod n."""
    _require_modulus(n)
    return Ring(
        0, lambda a: (-a) % n, lambda a, b: (a + b) % n, lambda a, b: (a * b) % n, range(n),
        name=f"ring of integers mod {n}",
    )


@lru_cache(maxsize=None)
def prime_field(p: int) -> Field:
    """GF(p): integers mod a prime p."""
    _require_prime(p)
    return Field(
        0, 1,
        lambda a: (-a) % p, lambda a: pow(a, p - 2, p),
        lambda a, b: (a + b) % p, lambda a, b: (a * b) % p,
        range(p),
        name=f"GF({p})",
    )


@lru_cache(maxsize=None)
def boolean_field() -> Field:
    """GF(2) over {0, 1} with XOR as addition and AND as multiplication."""
    return Field(0, 1, lambda a: a, lambda a: a, xor, and_, 0, 1, name="GF(2)")
