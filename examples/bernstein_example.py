#!usr/bin/env python3

# Example of Bernstein basis polynomials, their power series form and
# inner products.

from fractions import Fraction

import numpy as np

from bernpoly import (BernsteinPoly, bernstein_basis, dot, norm, promote,
                      to_polynomial)

# ----------------------------------------------------------------------
# Basis polynomials on the default interval [0, 1].

B = BernsteinPoly(3, 2)
Q = BernsteinPoly(4, 3)
print(f"B = {B}")  # BernsteinPoly(0.0 + 0.0·x + 3.0·x² - 3.0·x³)
print(f"Q = {Q}")
print(f"dot(B, Q) = {dot(B, Q)}")  # 0.07142857142857142
print(f"norm(B) = {norm(B)}")  # 0.29277002188455997

# ----------------------------------------------------------------------
# Inner products are exact with Fraction endpoints.  Mixing element
# types requires promotion first.

B_frac = BernsteinPoly(3, 2, Fraction(0), Fraction(1))
Q_int = BernsteinPoly(4, 3, 0, 1)
print(f"\nExact dot(B, Q) = {dot(*promote(B_frac, Q_int))}")  # 1/14

# ----------------------------------------------------------------------
# The complete basis on [-1, 2] sums to one.

x = np.linspace(-1.0, 2.0, 7)
total = sum(to_polynomial(b) for b in bernstein_basis(5, -1.0, 2.0))
print(f"\nSum of basis on [-1, 2] at x = {x}:\n\t{total(x)}")
