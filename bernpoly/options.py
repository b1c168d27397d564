"""
Options (:mod:`bernpoly.options`)
=================================

.. currentmodule:: bernpoly.options

Package-wide options controlling conversion warnings and the text style
used when rendering polynomials.
"""
from __future__ import annotations

from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class BernsteinOptions:
    """
    Dataclass that holds option flags for converting and displaying
    Bernstein polynomials.  See `get_bernstein_options` and
    `set_bernstein_options` for full details.
    """
    degree_warning: int
    unicode_str: bool

    def __post_init__(self):
        """Check certain values"""
        if self.degree_warning < 1:
            raise ValueError("Require 'degree_warning' >= 1.")


# Create single instance and set defaults.
_bernstein_options = BernsteinOptions(
    degree_warning=20,
    unicode_str=True
)


# ----------------------------------------------------------------------

def get_bernstein_options() -> BernsteinOptions:
    """
    Returns
    -------
    bernstein_options : BernsteinOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_bernstein_options`.
    """
    return replace(_bernstein_options)


# noinspection PyIncorrectDocstring
def set_bernstein_options(**kwargs):
    """
    Set the current options.

    Parameters
    ----------
    degree_warning : int, default = 20
        Issue a `RuntimeWarning` when a Bernstein polynomial of degree
        greater than this value is converted to power series form.  The
        monomial coefficients of high degree basis polynomials grow
        like :math:`2^n` and alternate in sign, so floating point
        evaluation of the result loses accuracy.

    unicode_str : bool, default = True
        Render polynomials using unicode superscripts (e.g. ``x²``) when
        `str` is called.  If `False`, the ASCII style (``x**2``) is used.

    See Also
    --------
    get_bernstein_options

    Examples
    --------
    >>> from bernpoly import BernsteinPoly, set_bernstein_options
    >>> set_bernstein_options(unicode_str=False)
    >>> print(BernsteinPoly(2, 1))
    BernsteinPoly(0.0 + 2.0 x - 2.0 x**2)
    """
    global _bernstein_options
    _bernstein_options = replace(_bernstein_options, **kwargs)
