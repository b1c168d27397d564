"""
Exceptions (:mod:`bernpoly.exception`)
======================================

.. currentmodule:: bernpoly.exception

Errors raised when Bernstein polynomials are used with an unsuitable
interval or numeric type.
"""


# ======================================================================

class BernsteinError(Exception):
    """
    Base class for errors raised by this package.  Additional
    information (optional) is included to allow the reason for the
    failure to be determined.
    """

    def __init__(self, *args, details: str = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `Exception`.
        details : str, default = None
            Additional text relating to the specific failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments (e.g. the offending endpoints).
        """
        super().__init__(*args)
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class InvalidIntervalError(BernsteinError, ValueError):
    """Raised when an interval's lower bound exceeds its upper bound."""
    pass


class DegenerateIntervalError(BernsteinError, ValueError):
    """
    Raised when an interval has zero width but a non-zero width is
    required, e.g. conversion of a basis polynomial with `n` > 0 or
    computing a norm.
    """
    pass


class IntervalMismatchError(BernsteinError, ValueError):
    """Raised when two operands that must share an interval do not."""
    pass


class ConversionError(BernsteinError, ValueError):
    """
    Raised when a value cannot be represented by the requested numeric
    type.
    """
    pass
