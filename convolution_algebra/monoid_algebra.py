"""
Monoid Algebra Module

Convolution algebras over a key monoid K and a coefficient semiring R.
An element is a finite formal sum of keys with coefficients; the product
convolves supports through the key combination rule:

    (f * g)(x) = sum over a1 in supp f, a2 in supp g with a1·a2 = x of f(a1) g(a2)

Two variants share the machinery:

- MonoidAlgebra: the combination rule is multiplication on K (default (N, *))
- AddMonoidAlgebra: the combination rule is addition on K (default (N, +)),
  which makes its elements polynomials when K = N
"""

import logging
from typing import Any, Callable, FrozenSet, Hashable, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

import numpy as np

from .constants import DENSE_DTYPE
from .errors import StructureError
from .finsupp import FiniteSupportMap
from .structures import INTEGERS, NAT_ADD, NAT_MUL, KeyMonoid, Semiring

logger = logging.getLogger(__name__)


class ConvolutionAlgebra:
    """
    Element of the convolution algebra R[K].

    Instances are immutable values. Subclasses fix the default key structure.

    Attributes:
        keys: Key monoid whose combination rule drives multiplication
        coeffs: Coefficient semiring
        terms: Underlying FiniteSupportMap
    """

    default_keys: KeyMonoid = NAT_MUL

    __slots__ = ("_keys", "_terms")

    def __init__(self, terms: Optional[Mapping[Hashable, Any]] = None,
                 keys: Optional[KeyMonoid] = None, coeffs: Semiring = INTEGERS):
        self._keys = keys or self.default_keys
        self._terms = FiniteSupportMap(terms, coeffs)

    @classmethod
    def _from_terms(cls, terms: FiniteSupportMap, keys: KeyMonoid) -> "ConvolutionAlgebra":
        element = object.__new__(cls)
        element._keys = keys
        element._terms = terms
        return element

    def _like(self, terms: FiniteSupportMap) -> "ConvolutionAlgebra":
        return self._from_terms(terms, self._keys)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, keys: Optional[KeyMonoid] = None, coeffs: Semiring = INTEGERS) -> "ConvolutionAlgebra":
        return cls(keys=keys, coeffs=coeffs)

    @classmethod
    def single(cls, key: Hashable, value: Any, keys: Optional[KeyMonoid] = None,
               coeffs: Semiring = INTEGERS) -> "ConvolutionAlgebra":
        """The element value·[key]."""
        return cls._from_terms(FiniteSupportMap.single(key, value, coeffs), keys or cls.default_keys)

    @classmethod
    def of(cls, key: Hashable, keys: Optional[KeyMonoid] = None,
           coeffs: Semiring = INTEGERS) -> "ConvolutionAlgebra":
        """The generator 1·[key]."""
        return cls.single(key, coeffs.one, keys, coeffs)

    @classmethod
    def one(cls, keys: Optional[KeyMonoid] = None, coeffs: Semiring = INTEGERS) -> "ConvolutionAlgebra":
        """Multiplicative identity: 1 at the identity key, 0 elsewhere."""
        keys = keys or cls.default_keys
        return cls.single(keys.identity, coeffs.one, keys, coeffs)

    @classmethod
    def algebra_map(cls, value: Any, keys: Optional[KeyMonoid] = None,
                    coeffs: Semiring = INTEGERS) -> "ConvolutionAlgebra":
        """Embed a coefficient as value·[identity]."""
        keys = keys or cls.default_keys
        return cls.single(keys.identity, value, keys, coeffs)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Hashable, Any]], keys: Optional[KeyMonoid] = None,
                   coeffs: Semiring = INTEGERS) -> "ConvolutionAlgebra":
        """Sum of value·[key] over the pairs; repeated keys accumulate."""
        return cls._from_terms(FiniteSupportMap.from_pairs(pairs, coeffs), keys or cls.default_keys)

    @classmethod
    def from_finsupp(cls, terms: FiniteSupportMap, keys: Optional[KeyMonoid] = None) -> "ConvolutionAlgebra":
        return cls._from_terms(terms, keys or cls.default_keys)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def keys(self) -> KeyMonoid:
        return self._keys

    @property
    def coeffs(self) -> Semiring:
        return self._terms.coeffs

    @property
    def terms(self) -> FiniteSupportMap:
        return self._terms

    @property
    def support(self) -> FrozenSet[Hashable]:
        return self._terms.support

    def evaluate(self, key: Hashable) -> Any:
        return self._terms.evaluate(key)

    def __getitem__(self, key: Hashable) -> Any:
        return self._terms.evaluate(key)

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        return self._terms.items()

    def __len__(self) -> int:
        return len(self._terms)

    def __bool__(self) -> bool:
        return bool(self._terms)

    @property
    def is_commutative(self) -> bool:
        """True only when both the key combination and the coefficients commute."""
        return self._keys.commutative and self.coeffs.commutative

    # -------------------------------------------------------------------------
    # Additive structure
    # -------------------------------------------------------------------------

    def _check_compatible(self, other: "ConvolutionAlgebra") -> None:
        if type(self) is not type(other) or self._keys != other._keys:
            raise StructureError(
                f"Cannot combine {type(self).__name__} over {self._keys.name} "
                f"with {type(other).__name__} over {other._keys.name}"
            )
        if self.coeffs != other.coeffs:
            raise StructureError(
                f"Cannot combine coefficients in {self.coeffs.name} and {other.coeffs.name}"
            )

    def __add__(self, other: "ConvolutionAlgebra") -> "ConvolutionAlgebra":
        if not isinstance(other, ConvolutionAlgebra):
            return NotImplemented
        self._check_compatible(other)
        return self._like(self._terms + other._terms)

    def __neg__(self) -> "ConvolutionAlgebra":
        return self._like(-self._terms)

    def __sub__(self, other: "ConvolutionAlgebra") -> "ConvolutionAlgebra":
        if not isinstance(other, ConvolutionAlgebra):
            return NotImplemented
        self._check_compatible(other)
        return self._like(self._terms - other._terms)

    def smul(self, scalar: Any) -> "ConvolutionAlgebra":
        """Left scalar action of the coefficient semiring."""
        return self._like(self._terms.smul(scalar))

    # -------------------------------------------------------------------------
    # Convolution
    # -------------------------------------------------------------------------

    def __mul__(self, other: "ConvolutionAlgebra") -> "ConvolutionAlgebra":
        if not isinstance(other, ConvolutionAlgebra):
            return NotImplemented
        self._check_compatible(other)
        coeffs = self.coeffs
        combine = self._keys.combine
        acc = {}
        for a1, b1 in self._terms.items():
            for a2, b2 in other._terms.items():
                x = combine(a1, a2)
                product = coeffs.mul(b1, b2)
                acc[x] = coeffs.add(acc[x], product) if x in acc else product
        return self._like(FiniteSupportMap(acc, coeffs))

    def __pow__(self, exponent: int) -> "ConvolutionAlgebra":
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        result = self.one(self._keys, self.coeffs)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def mul_apply(self, other: "ConvolutionAlgebra", key: Hashable) -> Any:
        """
        Coefficient of ``key`` in ``self * other`` without building the product.

        Sums f(a1) g(a2) over all support pairs with a1·a2 == key.
        """
        self._check_compatible(other)
        coeffs = self.coeffs
        combine = self._keys.combine
        return coeffs.sum(
            coeffs.mul(b1, b2)
            for a1, b1 in self._terms.items()
            for a2, b2 in other._terms.items()
            if combine(a1, a2) == key
        )

    def mul_apply_left(self, other: "ConvolutionAlgebra", key: Hashable) -> Any:
        """
        Group closed form summing over the left factor:

            (f * g)(x) = sum over a in supp f of f(a) g(a⁻¹·x)
        """
        self._check_compatible(other)
        keys = self._keys
        if not keys.is_group:
            raise StructureError(f"mul_apply_left needs a group, but {keys.name} has no inverses")
        coeffs = self.coeffs
        return coeffs.sum(
            coeffs.mul(b, other.evaluate(keys.combine(keys.invert(a), key)))
            for a, b in self._terms.items()
        )

    def mul_apply_right(self, other: "ConvolutionAlgebra", key: Hashable) -> Any:
        """
        Group closed form summing over the right factor:

            (f * g)(x) = sum over a in supp g of f(x·a⁻¹) g(a)
        """
        self._check_compatible(other)
        keys = self._keys
        if not keys.is_group:
            raise StructureError(f"mul_apply_right needs a group, but {keys.name} has no inverses")
        coeffs = self.coeffs
        return coeffs.sum(
            coeffs.mul(self.evaluate(keys.combine(key, keys.invert(a))), b)
            for a, b in other._terms.items()
        )

    def product_support(self, other: "ConvolutionAlgebra") -> FrozenSet[Hashable]:
        """All keys a1·a2 for a1 in supp self, a2 in supp other; contains supp(self * other)."""
        combine = self._keys.combine
        return frozenset(combine(a1, a2) for a1 in self._terms for a2 in other._terms)

    def commutes_with(self, other: "ConvolutionAlgebra") -> bool:
        return self * other == other * self

    def map_domain(self, func: Callable[[Hashable], Hashable],
                   keys: Optional[KeyMonoid] = None) -> "ConvolutionAlgebra":
        """
        Push keys forward along ``func`` into ``keys``.

        When ``func`` is a monoid homomorphism the result is an algebra
        homomorphism; colliding keys accumulate.
        """
        return self._from_terms(self._terms.map_domain(func), keys or self._keys)

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConvolutionAlgebra):
            return NotImplemented
        return (type(self) is type(other)
                and self._keys == other._keys
                and self._terms == other._terms)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._keys.name, self._terms))

    def __repr__(self) -> str:
        terms = " + ".join(f"{v!r}·[{k!r}]" for k, v in self._terms.items()) or "0"
        return f"{type(self).__name__}({terms}; {self._keys.name}, {self.coeffs.name})"


class MonoidAlgebra(ConvolutionAlgebra):
    """
    Convolution algebra over a multiplicatively written monoid.

    The product of [a1] and [a2] is [a1·a2]; the identity is 1·[1].
    """

    default_keys = NAT_MUL

    __slots__ = ()


class AddMonoidAlgebra(ConvolutionAlgebra):
    """
    Convolution algebra over an additively written monoid.

    The product of [a1] and [a2] is [a1 + a2]; the identity is 1·[0].
    With keys (N, +) elements are polynomials: key n is the exponent of X^n.
    """

    default_keys = NAT_ADD

    __slots__ = ()

    def _require_polynomial_keys(self, operation: str) -> None:
        if self._keys != NAT_ADD:
            raise StructureError(f"{operation} needs keys {NAT_ADD.name}, got {self._keys.name}")

    def degree(self) -> Optional[int]:
        """Largest exponent with a nonzero coefficient, None for zero."""
        self._require_polynomial_keys("degree")
        return max(self.support) if self else None

    def to_dense(self) -> np.ndarray:
        """
        Coefficient array indexed by exponent.

        Returns:
            numpy array of length degree + 1 (empty for zero)
        """
        self._require_polynomial_keys("to_dense")
        degree = self.degree()
        length = 0 if degree is None else degree + 1
        dense = np.empty(length, dtype=DENSE_DTYPE)
        for exponent in range(length):
            dense[exponent] = self._terms.evaluate(exponent)
        return dense

    @classmethod
    def from_dense(cls, coefficients: Sequence[Any], coeffs: Semiring = INTEGERS) -> "AddMonoidAlgebra":
        """Build a polynomial from coefficients indexed by exponent."""
        array = np.asarray(coefficients, dtype=DENSE_DTYPE).ravel()
        logger.debug("Building polynomial from %d dense coefficients over %s", array.size, coeffs.name)
        return cls({exponent: value for exponent, value in enumerate(array.tolist())},
                   keys=NAT_ADD, coeffs=coeffs)
