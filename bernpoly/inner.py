"""
Inner Products (:mod:`bernpoly.inner`)
======================================

.. currentmodule:: bernpoly.inner

:math:`L^2` inner products and induced norms.  Inner products of two
Bernstein basis polynomials sharing an interval are computed in closed
form; power series use explicit integration over a given interval.
"""
from __future__ import annotations

import numbers
from fractions import Fraction
from math import comb, sqrt

from numpy.polynomial import Polynomial

from bernpoly.basis import BernsteinPoly
from bernpoly.interval import (check_interval, check_same_interval,
                               check_width)


# Written October 2026.

# ======================================================================

def dot(b: BernsteinPoly, q: BernsteinPoly):
    r"""
    Inner product of two Bernstein basis polynomials :math:`B_{m,i}` and
    :math:`B_{n,j}` on the same interval :math:`[α, β]`:

    .. math::

        \langle B_{m,i}, B_{n,j} \rangle = \int_α^β B_{m,i} B_{n,j} dx
            = \frac{(β - α) {m \choose i} {n \choose j}}
                   {(m + n + 1) {m + n \choose i + j}}

    The result is exact for exact element types (e.g. `Fraction`).  A
    zero width interval gives zero.

    Raises
    ------
    TypeError
        If `b` and `q` have different element types.  Use ``promote``
        to find a common type first.
    IntervalMismatchError
        If `b` and `q` are not defined on the same interval.
    InvalidIntervalError
        If the shared interval has `α` > `β`.

    Examples
    --------
    >>> dot(BernsteinPoly(3, 2), BernsteinPoly(4, 3))
    0.07142857142857142
    """
    if b.dtype is not q.dtype:
        raise TypeError(f"Element types differ ({b.dtype.__name__} and "
                        f"{q.dtype.__name__}), promote operands first.")

    check_same_interval(b, q)
    m, i, n, j = b.n, b.i, q.n, q.i
    ratio = Fraction(comb(m, i) * comb(n, j),
                     (m + n + 1) * comb(m + n, i + j))

    # Ratio is exact until converted to the type of the width.
    width = b.β - b.α
    if isinstance(width, numbers.Integral):
        return width * float(ratio)
    if isinstance(width, numbers.Rational):
        return width * ratio
    return width * type(width)(float(ratio))


def norm(b: BernsteinPoly) -> float:
    r"""
    Norm induced by the inner product, normalised by the interval width:

    .. math::

        \lVert B_{n,i} \rVert = \frac{\sqrt{\langle B_{n,i}, B_{n,i}
            \rangle}}{β - α}

    Raises
    ------
    InvalidIntervalError
        If `b.α` > `b.β`.
    DegenerateIntervalError
        If `b.α` == `b.β`.

    Examples
    --------
    >>> norm(BernsteinPoly(3, 2))
    0.29277002188455997
    """
    check_width(b.α, b.β)
    return sqrt(dot(b, b)) / (b.β - b.α)


# ----------------------------------------------------------------------

def poly_dot(p: Polynomial, q: Polynomial, α=0.0, β=1.0):
    """
    Inner product of power series `p` and `q` over :math:`[α, β]`,
    found by integrating ``p * q``.  Combine with ``promote`` to take
    inner products of mixed representations, e.g.::

        poly_dot(*promote(b, p), b.α, b.β)

    Raises
    ------
    InvalidIntervalError
        If `α` > `β`.
    """
    check_interval(α, β)
    return (p * q).integ(lbnd=α)(β)


def poly_norm(p: Polynomial, α=0.0, β=1.0):
    """
    Norm of power series `p` induced by ``poly_dot``, normalised by the
    interval width (see ``norm``).

    Raises
    ------
    InvalidIntervalError
        If `α` > `β`.
    DegenerateIntervalError
        If `α` == `β`.
    """
    check_width(α, β)
    return sqrt(poly_dot(p, p, α, β)) / (β - α)
