"""
Convolution Algebra Constants

Library-wide defaults:

- DEFAULT_CHECK_BOUND: Largest n inspected by bounded checks on arithmetic
  functions (is_multiplicative, agrees_with) when no bound is given
- DENSE_DTYPE: numpy dtype used for dense coefficient arrays and value tables.
  Object dtype keeps exact ints and Fractions intact
- DEFAULT_SAMPLE_LIMIT: Cap on the number of elements combined pairwise or
  triple-wise by the law checks in algebra_laws
"""

DEFAULT_CHECK_BOUND = 50

DENSE_DTYPE = object

# Triple-wise checks grow as n^3
DEFAULT_SAMPLE_LIMIT = 12

assert DEFAULT_CHECK_BOUND >= 1, "bounded checks must look at n = 1 at least"
