"""
.. This module acts as the top-level API documentation.

.. module: bernpoly

Bernstein basis polynomials on arbitrary intervals as numeric values:
conversion to power series form (NumPy `Polynomial`), closed form inner
products and norms, and promotion rules for mixing representations and
element types.

Types
-----

.. autosummary::
    :toctree:

    BernsteinPoly
    BernsteinOptions

Functions
---------

.. autosummary::
    :toctree:

    basis_value
    bernstein_basis
    check_interval
    check_same_interval
    check_width
    common_type
    convert_element_type
    convert_number
    dot
    norm
    poly_dot
    poly_norm
    promote
    promote_rule
    render
    to_polynomial

Exceptions
----------

.. autosummary::
    :toctree:

    BernsteinError
    ConversionError
    DegenerateIntervalError
    IntervalMismatchError
    InvalidIntervalError
"""

__version__ = "0.1.0"

from .exception import (BernsteinError, ConversionError,
                        DegenerateIntervalError, IntervalMismatchError,
                        InvalidIntervalError)
from .interval import check_interval, check_same_interval, check_width
from .scalar import common_type, convert_number, element_type
from .options import (BernsteinOptions, get_bernstein_options,
                      set_bernstein_options)
from .basis import (BernsteinPoly, basis_value, bernstein_basis,
                    convert_element_type)
from .convert import to_polynomial
from .promote import poly_element_type, promote, promote_rule
from .inner import dot, norm, poly_dot, poly_norm
from .display import render
