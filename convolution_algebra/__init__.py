"""
Convolution Algebra - Finite-Support Convolution Structures

Monoid algebras, additive monoid algebras (polynomials and group rings) and
arithmetic functions under Dirichlet convolution, with the universal property
of monoid algebras exposed as ``lift``.
"""

import logging

__version__ = "0.1.0"

from .errors import ConvolutionAlgebraError, StructureError, ArithmeticFunctionError
from .structures import (
    Semiring,
    KeyMonoid,
    NATURALS,
    INTEGERS,
    RATIONALS,
    REALS,
    BOOLEANS,
    zmod,
    matrix_ring,
    NAT_ADD,
    INT_ADD,
    NAT_MUL,
    FREE_MONOID,
    cyclic_group,
    nat_vectors,
    symmetric_group,
)
from .finsupp import FiniteSupportMap
from .monoid_algebra import ConvolutionAlgebra, MonoidAlgebra, AddMonoidAlgebra
from .arithmetic_function import ArithmeticFunction, convolve_table
from .divisors import divisors, proper_divisors, divisors_antidiagonal, factorization
from .lift import (
    TargetAlgebra,
    MonoidHom,
    AlgebraHom,
    scalar_algebra,
    matrix_algebra,
    convolution_target,
    lift,
    lift_symm,
    alg_hom_ext,
    agree_on,
)
from .algebra_laws import verify_semiring_laws, verify_commutativity, verify_hom_laws

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConvolutionAlgebraError",
    "StructureError",
    "ArithmeticFunctionError",
    "Semiring",
    "KeyMonoid",
    "NATURALS",
    "INTEGERS",
    "RATIONALS",
    "REALS",
    "BOOLEANS",
    "zmod",
    "matrix_ring",
    "NAT_ADD",
    "INT_ADD",
    "NAT_MUL",
    "FREE_MONOID",
    "cyclic_group",
    "nat_vectors",
    "symmetric_group",
    "FiniteSupportMap",
    "ConvolutionAlgebra",
    "MonoidAlgebra",
    "AddMonoidAlgebra",
    "ArithmeticFunction",
    "convolve_table",
    "divisors",
    "proper_divisors",
    "divisors_antidiagonal",
    "factorization",
    "TargetAlgebra",
    "MonoidHom",
    "AlgebraHom",
    "scalar_algebra",
    "matrix_algebra",
    "convolution_target",
    "lift",
    "lift_symm",
    "alg_hom_ext",
    "agree_on",
    "verify_semiring_laws",
    "verify_commutativity",
    "verify_hom_laws",
]
