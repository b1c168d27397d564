"""
Intervals (:mod:`bernpoly.interval`)
====================================

.. currentmodule:: bernpoly.interval

Precondition checks applied to the interval :math:`[α, β]` of a
Bernstein polynomial before any operation that depends on it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from bernpoly.exception import (DegenerateIntervalError,
                                InvalidIntervalError,
                                IntervalMismatchError)

if TYPE_CHECKING:
    from bernpoly.basis import BernsteinPoly


# ======================================================================

def check_interval(α, β) -> None:
    """
    Check that `α` <= `β`.  Zero width intervals are accepted.

    Raises
    ------
    InvalidIntervalError
        If `α` > `β`.
    """
    if α > β:
        raise InvalidIntervalError("Invalid interval.", α=α, β=β)


def check_width(α, β) -> None:
    """
    Check that `α` < `β`, i.e. the interval is valid and has non-zero
    width.

    Raises
    ------
    InvalidIntervalError
        If `α` > `β`.
    DegenerateIntervalError
        If `α` == `β`.
    """
    check_interval(α, β)
    if α == β:
        raise DegenerateIntervalError("Interval has zero width.",
                                      α=α, β=β)


# ----------------------------------------------------------------------

def check_same_interval(a: BernsteinPoly, b: BernsteinPoly) -> None:
    """
    Check that `a` and `b` are defined on exactly the same interval, and
    that this interval is valid.

    Raises
    ------
    IntervalMismatchError
        If either pair of endpoints differ.
    InvalidIntervalError
        If the shared interval has `α` > `β`.
    """
    if a.α != b.α or a.β != b.β:
        raise IntervalMismatchError(
            "Operands are defined on different intervals.",
            details=f"[{a.α}, {a.β}] != [{b.α}, {b.β}]")

    check_interval(a.α, a.β)
