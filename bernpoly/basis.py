"""
Bernstein Basis (:mod:`bernpoly.basis`)
=======================================

.. currentmodule:: bernpoly.basis

The `BernsteinPoly` value type, representing a single member of the
Bernstein polynomial basis on an arbitrary interval.
"""
from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
from numpy.polynomial import Polynomial
from scipy.special import binom

from bernpoly.interval import check_interval, check_width
from bernpoly.scalar import common_type, convert_number, element_type


# Written October 2026.

# ======================================================================

@dataclass(frozen=True)
class BernsteinPoly:
    r"""
    The `i`-th Bernstein basis polynomial of degree `n` on the interval
    :math:`[α, β]`:

    .. math::

        B_{n,i}(x) = {n \choose i}
            \left(\frac{x - α}{β - α}\right)^i
            \left(\frac{β - x}{β - α}\right)^{n - i}

    Instances are immutable.  The interval is not checked on
    construction; checks are made by each operation that depends on it
    (conversion, evaluation, inner products).

    Parameters
    ----------
    n : int
        Polynomial degree, `n` >= 0.
    i : int
        Basis index, 0 <= `i` <= `n`.
    α, β : number, default = 0.0, 1.0
        Interval endpoints.  These determine the element type of the
        polynomial.  If the endpoints differ in type, both are converted
        to their common (widened) type.

    Raises
    ------
    TypeError
        If `n` or `i` are not integers or `α` / `β` are not numbers.
    ValueError
        If `n` < 0 or `i` is outside 0...`n`.

    Notes
    -----
    Arithmetic with another `BernsteinPoly`, a NumPy `Polynomial` or a
    scalar gives a `Polynomial` result after promotion (see
    `bernpoly.promote`), with `BernsteinPoly` as either operand.

    Examples
    --------
    >>> b = BernsteinPoly(3, 2)
    >>> b
    BernsteinPoly(n=3, i=2, α=0.0, β=1.0)
    >>> print(b)
    BernsteinPoly(0.0 + 0.0·x + 3.0·x² - 3.0·x³)
    >>> float(b(0.5))
    0.375
    """
    n: int
    i: int
    α: numbers.Number = 0.0
    β: numbers.Number = 1.0

    def __post_init__(self):
        for name in ('n', 'i'):
            val = getattr(self, name)
            if (not isinstance(val, numbers.Integral) or
                    isinstance(val, bool)):
                raise TypeError(f"'{name}' must be an integer, got "
                                f"{repr(val)}.")
            object.__setattr__(self, name, int(val))

        if self.n < 0:
            raise ValueError(f"Require n >= 0, got n = {self.n}.")
        if not (0 <= self.i <= self.n):
            raise ValueError(f"Require 0 <= i <= n, got i = {self.i}, "
                             f"n = {self.n}.")

        # Endpoints share a single element type.
        t_α, t_β = element_type(self.α), element_type(self.β)
        if t_α is not t_β:
            to_type = common_type(t_α, t_β)
            object.__setattr__(self, 'α', convert_number(self.α, to_type))
            object.__setattr__(self, 'β', convert_number(self.β, to_type))

    # -- Properties ----------------------------------------------------

    @property
    def dtype(self) -> type:
        """Numeric element type shared by the endpoints."""
        return type(self.α)

    @property
    def interval(self) -> tuple:
        """Interval endpoints ``(α, β)``."""
        return self.α, self.β

    @property
    def width(self):
        """Interval width `β` - `α`."""
        return self.β - self.α

    # -- Public Methods ------------------------------------------------

    def astype(self, to_type: type) -> BernsteinPoly:
        """Shorthand for ``convert_element_type(self, to_type)``."""
        return convert_element_type(self, to_type)

    def __call__(self, x: npt.ArrayLike):
        """
        Evaluate the polynomial at `x` in closed form.  Shorthand for
        ``basis_value(self, x)``.
        """
        return basis_value(self, x)

    def __str__(self) -> str:
        from bernpoly.display import render
        return render(self)

    def __array__(self, *args, **kwargs):
        # `Polynomial` operators then defer to the reflected methods.
        raise TypeError("BernsteinPoly cannot be converted to an array, "
                        "use to_polynomial().")

    # -- Arithmetic ----------------------------------------------------

    def _binary_op(self, other, oper, reflect: bool = False):
        from bernpoly.convert import to_polynomial
        from bernpoly.promote import promote

        if isinstance(other, (BernsteinPoly, Polynomial)):
            a, b = promote(self, other)
            if isinstance(a, BernsteinPoly):
                a, b = to_polynomial(a), to_polynomial(b)

        elif isinstance(other, numbers.Number):
            a, b = to_polynomial(self), other

        else:
            return NotImplemented

        return oper(b, a) if reflect else oper(a, b)

    def __add__(self, other):
        return self._binary_op(other, operator.add)

    def __radd__(self, other):
        return self._binary_op(other, operator.add, reflect=True)

    def __sub__(self, other):
        return self._binary_op(other, operator.sub)

    def __rsub__(self, other):
        return self._binary_op(other, operator.sub, reflect=True)

    def __mul__(self, other):
        return self._binary_op(other, operator.mul)

    def __rmul__(self, other):
        return self._binary_op(other, operator.mul, reflect=True)

    def __neg__(self) -> Polynomial:
        from bernpoly.convert import to_polynomial
        return -to_polynomial(self)

    def __pow__(self, k: int) -> Polynomial:
        from bernpoly.convert import to_polynomial
        return to_polynomial(self) ** k


# ----------------------------------------------------------------------

def basis_value(b: BernsteinPoly, x: npt.ArrayLike):
    """
    Evaluate Bernstein polynomial `b` at `x` (scalar or array) using
    the closed form definition.

    Returns
    -------
    scalar or ndarray
        Same shape as `x`.

    Raises
    ------
    InvalidIntervalError
        If `b.α` > `b.β`.
    DegenerateIntervalError
        If `b.α` == `b.β` and `b.n` > 0.
    """
    x = np.asarray(x)
    if b.n == 0:
        check_interval(b.α, b.β)
        return np.ones_like(x, dtype=float)[()]

    check_width(b.α, b.β)
    n, i, w = b.n, b.i, b.width
    res = binom(n, i) * ((x - b.α) / w) ** i * ((b.β - x) / w) ** (n - i)
    return np.asarray(res)[()]


def bernstein_basis(n: int, α=0.0, β=1.0) -> list[BernsteinPoly]:
    """
    Returns the complete Bernstein basis of degree `n` on :math:`[α, β]`,
    i.e. ``[B(n, 0), B(n, 1), ..., B(n, n)]``.
    """
    return [BernsteinPoly(n, i, α, β) for i in range(n + 1)]


def convert_element_type(b: BernsteinPoly, to_type: type
                         ) -> BernsteinPoly:
    """
    Returns a new `BernsteinPoly` with the same `n` and `i` and the
    endpoints converted to `to_type`.

    Raises
    ------
    ConversionError
        If an endpoint cannot be represented by `to_type`.
    """
    if b.dtype is to_type:
        return b
    return BernsteinPoly(b.n, b.i, convert_number(b.α, to_type),
                         convert_number(b.β, to_type))
