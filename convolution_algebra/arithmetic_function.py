"""
Arithmetic Function Module

Functions f: N -> R with f(0) = 0, forming a ring under pointwise addition
and Dirichlet convolution:

    (f * g)(n) = sum over (d, e) with d * e = n of f(d) g(e)

The support of an arithmetic function need not be finite; each value of a
product only sums over the finite divisor pairs of one n. The value at 0 is
fixed to zero by construction and never computed from a divisor sum.

Classical functions provided: ζ, id, n^k, σ_k, Ω, ω, μ.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .constants import DEFAULT_CHECK_BOUND, DENSE_DTYPE
from .divisors import as_natural, coprime, divisors, divisors_antidiagonal, factorization, is_squarefree
from .errors import ArithmeticFunctionError, StructureError
from .finsupp import FiniteSupportMap
from .structures import INTEGERS, Semiring

logger = logging.getLogger(__name__)

# (operand, argument) pair a derived value depends on
Need = Tuple["ArithmeticFunction", int]
Lookup = Callable[["ArithmeticFunction", int], Any]


class ArithmeticFunction:
    """
    A function N -> R sending 0 to 0.

    Values are computed lazily and memoised; instances are immutable.

    Functions built from others by ring operations record which operand
    values each of their values needs, and are evaluated with an explicit
    work stack, so arbitrarily long chains of operations never recurse.

    Attributes:
        coeffs: Coefficient semiring
        name: Display name
    """

    __slots__ = ("_func", "_needs", "_coeffs", "_cache", "name")

    def __init__(self, func: Callable[[int], Any], coeffs: Semiring = INTEGERS,
                 name: Optional[str] = None):
        self._func = func
        self._needs: Optional[Callable[[int], Iterable[Need]]] = None
        self._coeffs = coeffs
        self._cache: Dict[int, Any] = {}
        self.name = name or getattr(func, "__name__", "f")

    @classmethod
    def _derived(cls, needs: Callable[[int], Iterable[Need]],
                 combine: Callable[[int, Lookup], Any], coeffs: Semiring,
                 name: str) -> "ArithmeticFunction":
        """
        Function whose value at n is ``combine(n, value)``.

        ``needs(n)`` lists the (operand, m) pairs that ``combine`` reads
        through ``value(operand, m)``; all of them are computed first.
        """
        result = cls(combine, coeffs, name)
        result._needs = needs
        return result

    @property
    def coeffs(self) -> Semiring:
        return self._coeffs

    def __call__(self, n: int) -> Any:
        n = as_natural(n)
        if n == 0:
            return self._coeffs.zero
        if n not in self._cache:
            self._fill(n)
        return self._cache[n]

    def _fill(self, n: int) -> None:
        stack: List[Need] = [(self, n)]
        while stack:
            node, m = stack[-1]
            if m in node._cache:
                stack.pop()
            elif node._needs is None:
                node._cache[m] = node._coeffs.coerce(node._func(m))
                stack.pop()
            else:
                pending = [(f, k) for f, k in node._needs(m) if k != 0 and k not in f._cache]
                if pending:
                    stack.extend(pending)
                else:
                    node._cache[m] = node._func(m, _cached)
                    stack.pop()

    def evaluate(self, n: int) -> Any:
        return self(n)

    def __repr__(self) -> str:
        return f"ArithmeticFunction({self.name}, {self._coeffs.name})"

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        return cls(lambda n: coeffs.zero, coeffs, name="0")

    @classmethod
    def one(cls, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """Dirichlet identity: 1 at n = 1, 0 elsewhere."""
        return cls(lambda n: coeffs.one if n == 1 else coeffs.zero, coeffs, name="1")

    @classmethod
    def from_values(cls, values: Sequence[Any], coeffs: Semiring = INTEGERS,
                    name: Optional[str] = None) -> "ArithmeticFunction":
        """
        Function given by values[n] for n < len(values), zero beyond.

        Raises:
            ArithmeticFunctionError: If values[0] is nonzero
        """
        values = [coeffs.coerce(v) for v in values]
        if values and not coeffs.is_zero(values[0]):
            raise ArithmeticFunctionError(f"Value at 0 must be zero, got {values[0]!r}")
        size = len(values)
        return cls(lambda n: values[n] if n < size else coeffs.zero, coeffs, name=name or "table")

    @classmethod
    def from_finsupp(cls, terms: FiniteSupportMap, name: Optional[str] = None) -> "ArithmeticFunction":
        """View a finite-support map on natural keys as an arithmetic function."""
        if 0 in terms:
            raise ArithmeticFunctionError(f"Value at 0 must be zero, got {terms[0]!r}")
        return cls(terms.evaluate, terms.coeffs, name=name or "finsupp")

    def to_finsupp(self, bound: int) -> FiniteSupportMap:
        """Restriction to 1..bound as a finite-support map."""
        return FiniteSupportMap.on_finset(range(1, as_natural(bound) + 1), self, self._coeffs)

    @classmethod
    def zeta(cls, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """ζ(n) = 1 for n > 0."""
        return cls(lambda n: coeffs.one, coeffs, name="ζ")

    @classmethod
    def identity(cls, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """id(n) = n."""
        return cls(coeffs.coerce, coeffs, name="id")

    @classmethod
    def power(cls, k: int, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """n ↦ n^k; power(0) agrees with ζ."""
        k = as_natural(k)
        return cls(lambda n: coeffs.coerce(n ** k), coeffs, name=f"pow{k}")

    @classmethod
    def sigma(cls, k: int, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """σ_k(n) = sum of d^k over the divisors d of n."""
        k = as_natural(k)
        return cls(lambda n: coeffs.sum(coeffs.coerce(d ** k) for d in divisors(n)),
                   coeffs, name=f"σ{k}")

    @classmethod
    def card_factors(cls, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """Ω(n): number of prime factors counted with multiplicity."""
        return cls(lambda n: coeffs.coerce(sum(factorization(n).values())), coeffs, name="Ω")

    @classmethod
    def card_distinct_factors(cls, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """ω(n): number of distinct prime factors."""
        return cls(lambda n: coeffs.coerce(len(factorization(n))), coeffs, name="ω")

    @classmethod
    def moebius(cls, coeffs: Semiring = INTEGERS) -> "ArithmeticFunction":
        """μ(n) = (-1)^ω(n) for squarefree n, else 0. Needs a ring."""
        coeffs.require_neg("moebius")

        def mu(n: int) -> Any:
            if not is_squarefree(n):
                return coeffs.zero
            return coeffs.one if len(factorization(n)) % 2 == 0 else coeffs.neg(coeffs.one)

        return cls(mu, coeffs, name="μ")

    # -------------------------------------------------------------------------
    # Ring operations
    # -------------------------------------------------------------------------

    def _check_compatible(self, other: "ArithmeticFunction") -> None:
        if self._coeffs != other._coeffs:
            raise StructureError(
                f"Cannot combine arithmetic functions over {self._coeffs.name} and {other._coeffs.name}"
            )

    def __add__(self, other: "ArithmeticFunction") -> "ArithmeticFunction":
        if not isinstance(other, ArithmeticFunction):
            return NotImplemented
        self._check_compatible(other)
        add = self._coeffs.add
        return ArithmeticFunction._derived(
            lambda n: ((self, n), (other, n)),
            lambda n, value: add(value(self, n), value(other, n)),
            self._coeffs, name=f"({self.name} + {other.name})",
        )

    def __neg__(self) -> "ArithmeticFunction":
        self._coeffs.require_neg("negation")
        neg = self._coeffs.neg
        return ArithmeticFunction._derived(
            lambda n: ((self, n),),
            lambda n, value: neg(value(self, n)),
            self._coeffs, name=f"-{self.name}",
        )

    def __sub__(self, other: "ArithmeticFunction") -> "ArithmeticFunction":
        if not isinstance(other, ArithmeticFunction):
            return NotImplemented
        self._check_compatible(other)
        return self + (-other)

    def smul(self, scalar: Any) -> "ArithmeticFunction":
        scalar = self._coeffs.coerce(scalar)
        mul = self._coeffs.mul
        return ArithmeticFunction._derived(
            lambda n: ((self, n),),
            lambda n, value: mul(scalar, value(self, n)),
            self._coeffs, name=f"{scalar!r}•{self.name}",
        )

    def __mul__(self, other: "ArithmeticFunction") -> "ArithmeticFunction":
        """Dirichlet convolution."""
        if not isinstance(other, ArithmeticFunction):
            return NotImplemented
        self._check_compatible(other)
        coeffs = self._coeffs

        def needs(n: int) -> List[Need]:
            pairs: List[Need] = []
            for d, e in divisors_antidiagonal(n):
                pairs.append((self, d))
                pairs.append((other, e))
            return pairs

        def convolved(n: int, value: Lookup) -> Any:
            return coeffs.sum(coeffs.mul(value(self, d), value(other, e))
                              for d, e in divisors_antidiagonal(n))

        return ArithmeticFunction._derived(needs, convolved, coeffs,
                                           name=f"({self.name} * {other.name})")

    def __pow__(self, exponent: int) -> "ArithmeticFunction":
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        result = ArithmeticFunction.one(self._coeffs)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def pmul(self, other: "ArithmeticFunction") -> "ArithmeticFunction":
        """Pointwise product n ↦ f(n) g(n)."""
        self._check_compatible(other)
        mul = self._coeffs.mul
        return ArithmeticFunction._derived(
            lambda n: ((self, n), (other, n)),
            lambda n, value: mul(value(self, n), value(other, n)),
            self._coeffs, name=f"({self.name} ⬝ {other.name})",
        )

    def ppow(self, k: int) -> "ArithmeticFunction":
        """Pointwise power n ↦ f(n)^k; ppow(0) is ζ."""
        k = as_natural(k)
        if k == 0:
            return ArithmeticFunction.zeta(self._coeffs)
        power = self._coeffs.power
        return ArithmeticFunction._derived(
            lambda n: ((self, n),),
            lambda n, value: power(value(self, n), k),
            self._coeffs, name=f"{self.name}^{k}",
        )

    # -------------------------------------------------------------------------
    # Derived functions
    # -------------------------------------------------------------------------

    def dirichlet_inverse(self) -> "ArithmeticFunction":
        """
        The g with f * g = 1.

        Uses g(1) = f(1)⁻¹ and, for n > 1,
        g(n) = -f(1)⁻¹ · sum over d | n, d > 1 of f(d) g(n / d).

        Raises:
            StructureError: If R has no negation, or f(1) is not a unit
        """
        coeffs = self._coeffs
        coeffs.require_neg("dirichlet_inverse")
        coeffs.require_inv("dirichlet_inverse")
        head = coeffs.inv(self(1))
        scale = coeffs.neg(head)

        def needs(n: int) -> List[Need]:
            pairs: List[Need] = []
            for d, e in divisors_antidiagonal(n):
                if d > 1:
                    pairs.append((self, d))
                    pairs.append((result, e))
            return pairs

        def inverse(n: int, value: Lookup) -> Any:
            if n == 1:
                return head
            tail = coeffs.sum(coeffs.mul(value(self, d), value(result, e))
                              for d, e in divisors_antidiagonal(n) if d > 1)
            return coeffs.mul(scale, tail)

        result = ArithmeticFunction._derived(needs, inverse, coeffs, name=f"{self.name}⁻¹")
        return result

    def sum_over_divisors(self) -> "ArithmeticFunction":
        """n ↦ sum of f(d) over d | n, i.e. ζ * f."""
        return ArithmeticFunction.zeta(self._coeffs) * self

    def moebius_inversion(self) -> "ArithmeticFunction":
        """μ * f; undoes sum_over_divisors."""
        return ArithmeticFunction.moebius(self._coeffs) * self

    # -------------------------------------------------------------------------
    # Bounded checks and tables
    # -------------------------------------------------------------------------

    def is_multiplicative(self, bound: int = DEFAULT_CHECK_BOUND) -> bool:
        """
        Check f(1) = 1 and f(mn) = f(m) f(n) for coprime m, n with mn <= bound.

        Returns:
            False as soon as a counterexample is found
        """
        coeffs = self._coeffs
        if self(1) != coeffs.one:
            return False
        for m in range(2, bound + 1):
            for n in range(2, bound // m + 1):
                if coprime(m, n) and self(m * n) != coeffs.mul(self(m), self(n)):
                    logger.debug("%s is not multiplicative at (%d, %d)", self.name, m, n)
                    return False
        return True

    def agrees_with(self, other: "ArithmeticFunction", bound: int = DEFAULT_CHECK_BOUND) -> bool:
        """Compare values on 0..bound."""
        if self._coeffs != other._coeffs:
            return False
        return all(self(n) == other(n) for n in range(as_natural(bound) + 1))

    def table(self, bound: int) -> np.ndarray:
        """Values at 0..bound as a numpy object array."""
        bound = as_natural(bound)
        values = np.empty(bound + 1, dtype=DENSE_DTYPE)
        for n in range(bound + 1):
            values[n] = self(n)
        return values


def _cached(f: ArithmeticFunction, n: int) -> Any:
    return f.coeffs.zero if n == 0 else f._cache[n]


def convolve_table(f: ArithmeticFunction, g: ArithmeticFunction, bound: int) -> np.ndarray:
    """
    All values of f * g on 0..bound at once.

    Walks the multiples of every d instead of factoring each n, so the cost
    is about bound * log(bound) multiplications.

    Args:
        f: Left factor
        g: Right factor
        bound: Largest n computed

    Returns:
        numpy object array whose entry n is (f * g)(n)
    """
    f._check_compatible(g)
    coeffs = f.coeffs
    bound = as_natural(bound)
    left, right = f.table(bound), g.table(bound)
    result = np.empty(bound + 1, dtype=DENSE_DTYPE)
    for n in range(bound + 1):
        result[n] = coeffs.zero
    for d in range(1, bound + 1):
        fd = left[d]
        if coeffs.is_zero(fd):
            continue
        for e in range(1, bound // d + 1):
            result[d * e] = coeffs.add(result[d * e], coeffs.mul(fd, right[e]))
    logger.debug("Convolved %s and %s up to %d", f.name, g.name, bound)
    return result
