"""
Algebraic Structures Module

Capability descriptors for the two ingredients of a convolution algebra:

- Semiring: the coefficient structure (zero, one, +, *), optionally carrying
  negation (a ring), unit inversion and commutativity
- KeyMonoid: the key structure (identity, combination rule), optionally
  carrying inverses (a group) and commutativity

Capabilities are independent flags checked where an operation needs them,
so a ring is simply a semiring whose ``neg`` is set.
"""

import numbers
import operator
from dataclasses import dataclass
from fractions import Fraction
from functools import lru_cache, reduce
from typing import Any, Callable, Iterable, Optional, Tuple

import numpy as np

from .errors import StructureError


def _same(x: Any) -> Any:
    return x


@dataclass(frozen=True)
class Semiring:
    """
    Coefficient structure for finite-support maps.

    Attributes:
        name: Display name
        zero: Additive identity
        one: Multiplicative identity
        add: Addition
        mul: Multiplication (argument order is preserved)
        neg: Additive inverse, or None for a plain semiring
        inv: Inverse of a unit, or None when units cannot be inverted
        coerce: Maps raw input (ints, nested sequences, ...) into the structure
        commutative: Whether mul is commutative
    """
    name: str
    zero: Any
    one: Any
    add: Callable[[Any, Any], Any] = operator.add
    mul: Callable[[Any, Any], Any] = operator.mul
    neg: Optional[Callable[[Any], Any]] = None
    inv: Optional[Callable[[Any], Any]] = None
    coerce: Callable[[Any], Any] = _same
    commutative: bool = True

    @property
    def has_neg(self) -> bool:
        return self.neg is not None

    @property
    def has_inv(self) -> bool:
        return self.inv is not None

    def is_zero(self, value: Any) -> bool:
        return value == self.zero

    def sum(self, values: Iterable[Any]) -> Any:
        """Fold values with ``add``, starting from ``zero``."""
        return reduce(self.add, values, self.zero)

    def sub(self, a: Any, b: Any) -> Any:
        self.require_neg("subtraction")
        return self.add(a, self.neg(b))

    def power(self, value: Any, exponent: int) -> Any:
        """Multiplicative power with a non-negative integer exponent."""
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        result = self.one
        for _ in range(exponent):
            result = self.mul(result, value)
        return result

    def require_neg(self, operation: str) -> None:
        if self.neg is None:
            raise StructureError(f"{operation} needs a ring, but {self.name} has no negation")

    def require_inv(self, operation: str) -> None:
        if self.inv is None:
            raise StructureError(f"{operation} needs unit inverses, which {self.name} does not provide")

    def __repr__(self) -> str:
        return f"Semiring({self.name})"


@dataclass(frozen=True)
class KeyMonoid:
    """
    Key structure whose combination rule drives convolution.

    Attributes:
        name: Display name
        identity: Neutral key
        op: Combination rule; ``op(a, b)`` is never reordered
        commutative: Whether op is commutative
        inverse: Group inverse, or None for a plain monoid
    """
    name: str
    identity: Any
    op: Callable[[Any, Any], Any]
    commutative: bool = True
    inverse: Optional[Callable[[Any], Any]] = None

    @property
    def is_group(self) -> bool:
        return self.inverse is not None

    def combine(self, a: Any, b: Any) -> Any:
        return self.op(a, b)

    def invert(self, a: Any) -> Any:
        if self.inverse is None:
            raise StructureError(f"{self.name} is a monoid without inverses")
        return self.inverse(a)

    def __repr__(self) -> str:
        return f"KeyMonoid({self.name})"


# =============================================================================
# Coefficient structures
# =============================================================================

def _int_unit_inverse(value: int) -> int:
    if value in (1, -1):
        return value
    raise StructureError(f"{value} is not a unit in the integers")


def _fraction_inverse(value: Fraction) -> Fraction:
    if value == 0:
        raise StructureError("0 is not a unit in the rationals")
    return 1 / Fraction(value)


def _float_inverse(value: float) -> float:
    if value == 0:
        raise StructureError("0.0 is not a unit in the reals")
    return 1.0 / value


def _to_int(value: Any) -> int:
    """Integral values only; 2.7 or 1/2 are rejected, never truncated."""
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"Expected an integer coefficient, got {value!r}")
    return int(value)


def _to_natural(value: Any) -> int:
    value = _to_int(value)
    if value < 0:
        raise ValueError(f"Expected a natural number coefficient, got {value}")
    return value


def _to_float(value: Any) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real coefficient, got {value!r}")
    return float(value)


NATURALS = Semiring(name="N", zero=0, one=1, coerce=_to_natural)

INTEGERS = Semiring(
    name="Z", zero=0, one=1,
    neg=operator.neg, inv=_int_unit_inverse, coerce=_to_int,
)

RATIONALS = Semiring(
    name="Q", zero=Fraction(0), one=Fraction(1),
    neg=operator.neg, inv=_fraction_inverse, coerce=Fraction,
)

# Exact equality is used throughout, so float coefficients only suit
# computations without rounding.
REALS = Semiring(
    name="R", zero=0.0, one=1.0,
    neg=operator.neg, inv=_float_inverse, coerce=_to_float,
)

BOOLEANS = Semiring(
    name="Bool", zero=False, one=True,
    add=operator.or_, mul=operator.and_, coerce=bool,
)


@lru_cache(maxsize=None)
def zmod(n: int) -> Semiring:
    """
    Integers modulo n.

    Args:
        n: Modulus, at least 1

    Returns:
        The commutative ring Z/nZ; units are invertible
    """
    if n < 1:
        raise ValueError(f"Modulus must be positive, got {n}")

    def add(a: int, b: int) -> int:
        return (a + b) % n

    def mul(a: int, b: int) -> int:
        return (a * b) % n

    def neg(a: int) -> int:
        return (-a) % n

    def inv(a: int) -> int:
        try:
            return pow(a, -1, n)
        except ValueError:
            raise StructureError(f"{a} is not a unit modulo {n}") from None

    def coerce(a: Any) -> int:
        return _to_int(a) % n

    return Semiring(
        name=f"Z/{n}Z", zero=0, one=1 % n,
        add=add, mul=mul, neg=neg, inv=inv, coerce=coerce,
    )


Matrix = Tuple[Tuple[Any, ...], ...]


def matrix_ring(n: int, base: Semiring = INTEGERS) -> Semiring:
    """
    Square n x n matrices over ``base``, stored as tuples of tuples.

    Products and sums are computed on numpy object arrays with Python
    operators and every entry is then coerced into ``base``. This is exact
    for the provided bases, since each is a quotient of the integers or
    works with Python operators directly.

    Args:
        n: Matrix size
        base: Entry semiring

    Returns:
        Matrix semiring, non-commutative for n >= 2
    """
    return _matrix_ring(n, base)


@lru_cache(maxsize=None)
def _matrix_ring(n: int, base: Semiring) -> Semiring:
    if n < 1:
        raise ValueError(f"Matrix size must be positive, got {n}")

    def to_matrix(array: np.ndarray) -> Matrix:
        return tuple(tuple(base.coerce(x) for x in row) for row in array.tolist())

    def coerce(value: Any) -> Matrix:
        array = np.asarray(value, dtype=object)
        if array.ndim == 0:
            scalar = base.coerce(array.item())
            return tuple(
                tuple(scalar if i == j else base.zero for j in range(n)) for i in range(n)
            )
        if array.shape != (n, n):
            raise ValueError(f"Expected a {n}x{n} matrix, got shape {array.shape}")
        return to_matrix(array)

    def add(a: Matrix, b: Matrix) -> Matrix:
        return to_matrix(np.array(a, dtype=object) + np.array(b, dtype=object))

    def mul(a: Matrix, b: Matrix) -> Matrix:
        return to_matrix(np.array(a, dtype=object) @ np.array(b, dtype=object))

    neg = None
    if base.has_neg:
        def neg(a: Matrix) -> Matrix:
            return tuple(tuple(base.neg(x) for x in row) for row in a)

    return Semiring(
        name=f"M{n}({base.name})",
        zero=coerce(base.zero),
        one=coerce(base.one),
        add=add, mul=mul, neg=neg, coerce=coerce,
        commutative=(n == 1 and base.commutative),
    )


# =============================================================================
# Key structures
# =============================================================================

def _concat(a: str, b: str) -> str:
    return a + b


NAT_ADD = KeyMonoid(name="(N, +)", identity=0, op=operator.add)

INT_ADD = KeyMonoid(name="(Z, +)", identity=0, op=operator.add, inverse=operator.neg)

NAT_MUL = KeyMonoid(name="(N, *)", identity=1, op=operator.mul)

FREE_MONOID = KeyMonoid(name="(str, concat)", identity="", op=_concat, commutative=False)


@lru_cache(maxsize=None)
def cyclic_group(n: int) -> KeyMonoid:
    """The cyclic group Z/nZ written additively."""
    if n < 1:
        raise ValueError(f"Group order must be positive, got {n}")

    def op(a: int, b: int) -> int:
        return (a + b) % n

    def inverse(a: int) -> int:
        return (-a) % n

    return KeyMonoid(name=f"(Z/{n}Z, +)", identity=0, op=op, inverse=inverse)


@lru_cache(maxsize=None)
def nat_vectors(d: int) -> KeyMonoid:
    """N^d under componentwise addition; keys are exponent tuples of length d."""
    if d < 1:
        raise ValueError(f"Dimension must be positive, got {d}")

    def op(a: Tuple[int, ...], b: Tuple[int, ...]) -> Tuple[int, ...]:
        if len(a) != d or len(b) != d:
            raise ValueError(f"Keys of (N^{d}, +) must have length {d}, got {a!r} and {b!r}")
        return tuple(x + y for x, y in zip(a, b))

    return KeyMonoid(name=f"(N^{d}, +)", identity=(0,) * d, op=op)


@lru_cache(maxsize=None)
def symmetric_group(n: int) -> KeyMonoid:
    """
    Permutations of range(n) as tuples, combined by composition.

    ``op(p, q)`` is the permutation i -> p[q[i]] (apply q first).
    """
    if n < 1:
        raise ValueError(f"Degree must be positive, got {n}")

    def op(p: Tuple[int, ...], q: Tuple[int, ...]) -> Tuple[int, ...]:
        return tuple(p[q[i]] for i in range(n))

    def inverse(p: Tuple[int, ...]) -> Tuple[int, ...]:
        result = [0] * n
        for i, image in enumerate(p):
            result[image] = i
        return tuple(result)

    return KeyMonoid(
        name=f"S{n}", identity=tuple(range(n)), op=op,
        commutative=(n <= 2), inverse=inverse,
    )
