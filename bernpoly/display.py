"""
Display (:mod:`bernpoly.display`)
=================================

.. currentmodule:: bernpoly.display

Text rendering of Bernstein basis polynomials in power series form.
"""
from __future__ import annotations

from bernpoly.basis import BernsteinPoly
from bernpoly.convert import to_polynomial
from bernpoly.options import get_bernstein_options


# ======================================================================

def render(b: BernsteinPoly, unicode: bool = None) -> str:
    """
    Returns a string showing `b` in power series form, e.g.
    ``BernsteinPoly(0.0 + 0.0·x + 3.0·x² - 3.0·x³)``.  If `unicode` is
    not given the ``unicode_str`` option is used (see
    `set_bernstein_options`).
    """
    if unicode is None:
        unicode = get_bernstein_options().unicode_str

    style = 'unicode' if unicode else 'ascii'
    return f"BernsteinPoly({format(to_polynomial(b), style)})"
