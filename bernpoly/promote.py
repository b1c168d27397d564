"""
Promotion (:mod:`bernpoly.promote`)
===================================

.. currentmodule:: bernpoly.promote

Rules for finding a common representation when combining Bernstein
polynomials with each other or with NumPy power series
(`Polynomial`):

- ``BernsteinPoly[S]`` with ``Polynomial[T]`` (either order) gives
  ``Polynomial[common_type(S, T)]``.
- ``BernsteinPoly[S]`` with ``BernsteinPoly[T]`` gives
  ``BernsteinPoly[common_type(S, T)]``.  The degree, index and interval
  of each operand are unchanged.
- ``Polynomial[S]`` with ``Polynomial[T]`` gives
  ``Polynomial[common_type(S, T)]``.
"""
from __future__ import annotations

import numbers
from functools import reduce
from typing import Union

import numpy as np
from numpy.polynomial import Polynomial

from bernpoly.basis import BernsteinPoly, convert_element_type
from bernpoly.convert import to_polynomial
from bernpoly.scalar import common_type, convert_number, element_type

_PolyT = Union[BernsteinPoly, Polynomial]


# Written October 2026.

# ======================================================================

def poly_element_type(p: _PolyT) -> type:
    """
    Returns the numeric element type of `p`.  For a `Polynomial` this
    is the type of the coefficients; `object` coefficients (e.g.
    `Fraction`) are widened to their common type.
    """
    if isinstance(p, BernsteinPoly):
        return p.dtype

    if isinstance(p, Polynomial):
        if p.coef.dtype != np.dtype(object):
            return p.coef.dtype.type
        return reduce(common_type, (element_type(c) for c in p.coef))

    raise TypeError(f"Expected BernsteinPoly or Polynomial, got "
                    f"{type(p).__name__}.")


def promote_rule(a: _PolyT, b: _PolyT) -> tuple[type, type]:
    """
    Returns the common representation of `a` and `b` as a tuple
    ``(BernsteinPoly | Polynomial, element_type)``.

    Examples
    --------
    >>> from fractions import Fraction
    >>> promote_rule(BernsteinPoly(3, 2, 0, 1), BernsteinPoly(2, 0, 0, Fraction(1, 2)))
    (<class 'bernpoly.basis.BernsteinPoly'>, <class 'fractions.Fraction'>)
    """
    to_type = common_type(poly_element_type(a), poly_element_type(b))
    if isinstance(a, BernsteinPoly) and isinstance(b, BernsteinPoly):
        return BernsteinPoly, to_type
    return Polynomial, to_type


def promote(a: _PolyT, b: _PolyT) -> tuple[_PolyT, _PolyT]:
    """
    Convert `a` and `b` to their common representation as determined
    by ``promote_rule``.

    Returns
    -------
    (a, b) : tuple
        Converted values, in the same order as given.

    Raises
    ------
    ConversionError
        If a value cannot be represented by the common element type.
    """
    rep, to_type = promote_rule(a, b)
    if rep is BernsteinPoly:
        return (convert_element_type(a, to_type),
                convert_element_type(b, to_type))

    return _as_polynomial(a, to_type), _as_polynomial(b, to_type)


# ----------------------------------------------------------------------

def _as_polynomial(p: _PolyT, to_type: type) -> Polynomial:
    if isinstance(p, BernsteinPoly):
        if issubclass(to_type, numbers.Real):
            return to_polynomial(p, dtype=to_type)

        # Complex endpoints are unordered, so widen after conversion.
        p = to_polynomial(p)

    if poly_element_type(p) is to_type:
        return p

    if issubclass(to_type, np.generic) or to_type in (int, float, complex):
        coef = p.coef.astype(to_type)
    else:
        coef = np.array([convert_number(c, to_type) for c in p.coef],
                        dtype=object)

    return Polynomial(coef, domain=p.domain, window=p.window,
                      symbol=p.symbol)
