"""
Conversion (:mod:`bernpoly.convert`)
====================================

.. currentmodule:: bernpoly.convert

Conversion of Bernstein basis polynomials to power series form, using
NumPy's `Polynomial` as the general polynomial representation.
"""
from __future__ import annotations

import warnings
from math import comb

from numpy.polynomial import Polynomial

from bernpoly.basis import BernsteinPoly, convert_element_type
from bernpoly.interval import check_interval, check_width
from bernpoly.options import get_bernstein_options


# Written October 2026.

# ======================================================================

def to_polynomial(b: BernsteinPoly, dtype: type = None) -> Polynomial:
    r"""
    Expand Bernstein polynomial `b` into power series form using the
    identity:

    .. math::

        B_{n,i}(x) = {n \choose i} (x - α)^i (x - β)^{n - i}
            \frac{(-1)^{n - i}}{(β - α)^n}

    Parameters
    ----------
    b : BernsteinPoly
        Polynomial to convert.
    dtype : type, optional
        If given, the endpoints of `b` are first converted to this type
        (e.g. a wider type), otherwise the element type of `b` is used.

    Returns
    -------
    Polynomial
        Equivalent power series.  Degree zero polynomials convert to the
        constant ``1``.

    Raises
    ------
    InvalidIntervalError
        If `b.α` > `b.β`.
    DegenerateIntervalError
        If `b.α` == `b.β` and `b.n` > 0.
    ConversionError
        If `dtype` cannot represent the endpoints.

    Warns
    -----
    RuntimeWarning
        If `b.n` exceeds the ``degree_warning`` option.

    Examples
    --------
    >>> to_polynomial(BernsteinPoly(3, 2))
    Polynomial([ 0.,  0.,  3., -3.], domain=[-1.,  1.], window=[-1.,  1.], symbol='x')
    """
    if dtype is not None:
        b = convert_element_type(b, dtype)

    n, i, α, β = b.n, b.i, b.α, b.β
    check_interval(α, β)
    if n == 0:
        return Polynomial([b.dtype(1)])

    check_width(α, β)

    degree_warning = get_bernstein_options().degree_warning
    if n > degree_warning:
        warnings.warn(f"Converting Bernstein polynomial of degree "
                      f"{n} > {degree_warning} to power series form, "
                      f"coefficients may be inaccurate.", RuntimeWarning)

    one = b.dtype(1)
    lo_poly = Polynomial([-α, one]) ** i  # (x - α)^i
    hi_poly = Polynomial([-β, one]) ** (n - i)  # (x - β)^(n - i)
    scale = b.dtype(comb(n, i) * (-1) ** (n - i)) / (β - α) ** n

    poly = lo_poly * hi_poly * scale
    return Polynomial(poly.coef + 0)  # Clear signed zeros.
