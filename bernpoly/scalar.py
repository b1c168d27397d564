"""
Scalar Types (:mod:`bernpoly.scalar`)
=====================================

.. currentmodule:: bernpoly.scalar

Functions for determining, widening and converting the numeric element
type used by polynomial endpoints and coefficients.  Both Python
numbers (`int`, `Fraction`, `float`, `complex`) and NumPy scalar types
are supported.
"""
from __future__ import annotations

import numbers

import numpy as np

from bernpoly.exception import ConversionError

# Python numeric tower, narrowest first.
_TOWER = (numbers.Integral, numbers.Rational, numbers.Real,
          numbers.Complex)


# Written October 2026.

# ======================================================================

def element_type(x) -> type:
    """
    Returns the numeric type of scalar `x`.

    Raises
    ------
    TypeError
        If `x` is not a number.
    """
    if not isinstance(x, numbers.Number):
        raise TypeError(f"Expected a number, got {type(x).__name__}.")
    return type(x)


def _rank(t: type) -> int:
    for rank, abc in enumerate(_TOWER):
        if issubclass(t, abc):
            return rank
    raise TypeError(f"'{t.__name__}' is not a numeric type.")


def common_type(s: type, t: type) -> type:
    """
    Returns the type obtained by standard numeric widening of `s` and
    `t`.

    If either type is a NumPy scalar type the NumPy promotion rules are
    used, unless the other type has no native NumPy representation
    (e.g. `Fraction`).  Otherwise the wider of the two on the
    Python numeric tower (`Integral` < `Rational` < `Real` < `Complex`)
    is returned, with `s` preferred when both have equal rank.

    Examples
    --------
    >>> from fractions import Fraction
    >>> common_type(int, Fraction)
    <class 'fractions.Fraction'>
    >>> common_type(Fraction, float)
    <class 'float'>
    >>> common_type(np.float32, np.float64)
    <class 'numpy.float64'>

    Raises
    ------
    TypeError
        If either argument is not a numeric type.
    """
    rank_s, rank_t = _rank(s), _rank(t)
    if s is t:
        return s

    if issubclass(s, np.generic) or issubclass(t, np.generic):
        dtype_s, dtype_t = _numpy_dtype(s), _numpy_dtype(t)
        if dtype_s is not None and dtype_t is not None:
            return np.promote_types(dtype_s, dtype_t).type

    return s if rank_s >= rank_t else t


def _numpy_dtype(t: type) -> np.dtype | None:
    # Types with a native (non-object) NumPy representation only.
    if issubclass(t, np.generic) or t in (bool, int, float, complex):
        return np.dtype(t)
    return None


# ----------------------------------------------------------------------

def convert_number(x, to_type: type):
    """
    Convert scalar `x` to `to_type` using ``to_type(x)``.  Rounding into
    a floating / complex type is accepted, however an integral
    `to_type` must represent `x` exactly.

    Examples
    --------
    >>> convert_number(3, float)
    3.0
    >>> convert_number(2.0, int)
    2
    >>> convert_number(2.5, int)  # Would truncate.
    Traceback (most recent call last):
    ...
    bernpoly.exception.ConversionError: Couldn't convert 2.5 to <class 'int'>.

    Raises
    ------
    ConversionError
        If the conversion fails or is inexact for an integral type.
    """
    if type(x) is to_type:
        return x

    try:
        res = to_type(x)
    except (TypeError, ValueError, OverflowError) as e:
        raise ConversionError(f"Couldn't convert {repr(x)} to "
                              f"{to_type}.", details=str(e)) from e

    if issubclass(to_type, numbers.Integral) and res != x:
        raise ConversionError(f"Couldn't convert {repr(x)} to "
                              f"{to_type}.")

    return res
