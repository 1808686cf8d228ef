"""
Exception hierarchy for convolution_algebra.

Every operation is total on its documented inputs. The exceptions here report
structural mismatches caught when a value is built or two values are
combined: a missing capability, or structures that do not belong together.
"""


class ConvolutionAlgebraError(Exception):
    """Base class for all library errors."""


class StructureError(ConvolutionAlgebraError, TypeError):
    """
    A required algebraic capability is missing or two structures disagree.

    Raised e.g. when negating over a semiring without negation, asking for
    ``mul_apply_left`` over a key monoid without inverses, or adding elements
    built over different coefficient structures.
    """


class ArithmeticFunctionError(ConvolutionAlgebraError, ValueError):
    """An arithmetic function would take a nonzero value at 0."""
