"""
Finite Support Map Module

The foundational container: a total function from keys to coefficients that
is nonzero on finitely many keys. Instances are immutable and every
constructor prunes zero entries, so ``support`` is always exact.
"""

from typing import Any, Callable, Dict, FrozenSet, Hashable, Iterable, Iterator, Mapping, Optional, Tuple

from .errors import StructureError
from .structures import INTEGERS, Semiring


class FiniteSupportMap:
    """
    Immutable key -> coefficient map with finitely many nonzero values.

    Equality is pointwise: two maps are equal iff they evaluate identically
    on the union of their supports and share a coefficient structure.

    Attributes:
        coeffs: Coefficient semiring
    """

    __slots__ = ("_coeffs", "_data", "_hash")

    def __init__(self, data: Optional[Mapping[Hashable, Any]] = None,
                 coeffs: Semiring = INTEGERS):
        self._coeffs = coeffs
        self._data: Dict[Hashable, Any] = {}
        self._hash: Optional[int] = None
        if data:
            for key, value in data.items():
                value = coeffs.coerce(value)
                if not coeffs.is_zero(value):
                    self._data[key] = value

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, coeffs: Semiring = INTEGERS) -> "FiniteSupportMap":
        return cls(coeffs=coeffs)

    @classmethod
    def single(cls, key: Hashable, value: Any, coeffs: Semiring = INTEGERS) -> "FiniteSupportMap":
        """Map sending ``key`` to ``value`` and everything else to zero."""
        return cls({key: value}, coeffs)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Hashable, Any]],
                   coeffs: Semiring = INTEGERS) -> "FiniteSupportMap":
        """
        Build a map from (key, value) pairs.

        Repeated keys accumulate with the semiring addition.
        """
        acc: Dict[Hashable, Any] = {}
        for key, value in pairs:
            value = coeffs.coerce(value)
            acc[key] = coeffs.add(acc[key], value) if key in acc else value
        return cls(acc, coeffs)

    @classmethod
    def on_finset(cls, keys: Iterable[Hashable], func: Callable[[Hashable], Any],
                  coeffs: Semiring = INTEGERS) -> "FiniteSupportMap":
        """Restrict ``func`` to the finite key set ``keys``."""
        return cls({key: func(key) for key in keys}, coeffs)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def coeffs(self) -> Semiring:
        return self._coeffs

    @property
    def support(self) -> FrozenSet[Hashable]:
        """Exact set of keys with nonzero value."""
        return frozenset(self._data)

    def evaluate(self, key: Hashable) -> Any:
        """Value at ``key``; zero for keys outside the support."""
        return self._data.get(key, self._coeffs.zero)

    def __getitem__(self, key: Hashable) -> Any:
        return self.evaluate(key)

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """Iterate over (key, nonzero value) pairs."""
        return iter(self._data.items())

    def to_dict(self) -> Dict[Hashable, Any]:
        return dict(self._data)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._data

    def sum(self, func: Callable[[Hashable, Any], Any], zero: Any = None,
            add: Optional[Callable[[Any, Any], Any]] = None) -> Any:
        """
        Fold ``func(key, value)`` over the support in an ambient additive monoid.

        Args:
            func: Applied to every (key, nonzero value) pair
            zero: Neutral element of the target; defaults to the coefficient zero
            add: Target addition; defaults to the coefficient addition

        Returns:
            The sum of all results, or ``zero`` for the zero map

        Raises:
            TypeError: If only one of ``zero`` and ``add`` is given
        """
        if add is None:
            if zero is not None:
                raise TypeError("A target zero needs a matching target addition")
            zero, add = self._coeffs.zero, self._coeffs.add
        elif zero is None:
            raise TypeError("A target addition needs a matching target zero")
        total = zero
        for key, value in self._data.items():
            total = add(total, func(key, value))
        return total

    # -------------------------------------------------------------------------
    # Pointwise operations
    # -------------------------------------------------------------------------

    def _check_compatible(self, other: "FiniteSupportMap") -> None:
        if self._coeffs != other._coeffs:
            raise StructureError(
                f"Cannot combine maps over {self._coeffs.name} and {other._coeffs.name}"
            )

    def __add__(self, other: "FiniteSupportMap") -> "FiniteSupportMap":
        if not isinstance(other, FiniteSupportMap):
            return NotImplemented
        self._check_compatible(other)
        add = self._coeffs.add
        acc = dict(self._data)
        for key, value in other._data.items():
            acc[key] = add(acc[key], value) if key in acc else value
        return FiniteSupportMap(acc, self._coeffs)

    def __neg__(self) -> "FiniteSupportMap":
        self._coeffs.require_neg("negation")
        neg = self._coeffs.neg
        return FiniteSupportMap({k: neg(v) for k, v in self._data.items()}, self._coeffs)

    def __sub__(self, other: "FiniteSupportMap") -> "FiniteSupportMap":
        if not isinstance(other, FiniteSupportMap):
            return NotImplemented
        self._check_compatible(other)
        return self + (-other)

    def smul(self, scalar: Any) -> "FiniteSupportMap":
        """Left scalar action: key -> scalar * value."""
        scalar = self._coeffs.coerce(scalar)
        mul = self._coeffs.mul
        return FiniteSupportMap({k: mul(scalar, v) for k, v in self._data.items()}, self._coeffs)

    def map_range(self, func: Callable[[Any], Any],
                  coeffs: Optional[Semiring] = None) -> "FiniteSupportMap":
        """Apply ``func`` to every value; ``func`` must send zero to zero."""
        return FiniteSupportMap({k: func(v) for k, v in self._data.items()}, coeffs or self._coeffs)

    def map_domain(self, func: Callable[[Hashable], Hashable]) -> "FiniteSupportMap":
        """Push keys forward along ``func``; colliding values accumulate."""
        return FiniteSupportMap.from_pairs(
            ((func(k), v) for k, v in self._data.items()), self._coeffs
        )

    def filter(self, predicate: Callable[[Hashable], bool]) -> "FiniteSupportMap":
        """Keep only the keys satisfying ``predicate``."""
        return FiniteSupportMap({k: v for k, v in self._data.items() if predicate(k)}, self._coeffs)

    def erase(self, key: Hashable) -> "FiniteSupportMap":
        return self.filter(lambda k: k != key)

    def update(self, key: Hashable, value: Any) -> "FiniteSupportMap":
        """Copy with the value at ``key`` replaced."""
        data = dict(self._data)
        data[key] = value
        return FiniteSupportMap(data, self._coeffs)

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiniteSupportMap):
            return NotImplemented
        if self._coeffs != other._coeffs:
            return False
        keys = self._data.keys() | other._data.keys()
        return all(self.evaluate(k) == other.evaluate(k) for k in keys)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        terms = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"FiniteSupportMap({{{terms}}}, {self._coeffs.name})"
