from __future__ import annotations

from typing import Any

import numpy
import scipy.interpolate

from .basis import hermite_power_coefficients
from .builder import EMPTY_VALUE
from .interpolant import FittedInterpolant


# Piecewise polynomial with the clamped boundary policy of FittedInterpolant.
# Based on PPoly from SciPy.
class ClampedPPoly(scipy.interpolate.PPoly):
    """Piecewise polynomial that is constant outside its breakpoints.

    Evaluation clamps the query to ``[x[0], x[-1]]`` so that values outside
    the breakpoints continue the first/last piece's boundary value instead
    of extrapolating the polynomial. Derivatives are zero outside, integrate()
    accounts for the constant continuation, and solve()/roots() only search
    within the breakpoints.

    Parameters
    ----------
    x : ndarray, shape (m+1,)
        Polynomial breakpoints, strictly increasing.
    c : ndarray, shape (k, m)
        Polynomial coefficients, order `k` and `m` intervals.

    Raises
    ------
    ValueError
        If `x` is not strictly increasing.
    """

    def __init__(self, x: Any, c: Any) -> None:
        x = numpy.asarray(x, dtype=float).flatten()
        if len(x) > 1 and numpy.any(numpy.diff(x) <= 0):
            raise ValueError("`x` must be strictly increasing.")
        super().__init__(numpy.asarray(c, dtype=float), x)

    # Call operator.
    # "nu" is the order of derivative to evaluate, must be non-negative.
    def __call__(self, x: Any, nu: int = 0, extrapolate: Any = None) -> Any:
        if nu < 0:
            raise ValueError("Antiderivatives are not supported, use antiderivative().")
        x = numpy.asarray(x, dtype=float)
        lo, hi = self.x[0], self.x[-1]
        values = super().__call__(numpy.clip(x, lo, hi), nu, extrapolate)
        if nu > 0:
            values = numpy.where((x < lo) | (x > hi), 0.0, values)
        return values

    # Derivatives and antiderivatives are returned as plain PPoly restricted to
    # the breakpoints (NaN outside), since the clamped value policy does not carry over.
    def derivative(self, nu: int = 1) -> scipy.interpolate.PPoly:
        d = super().derivative(nu)
        return scipy.interpolate.PPoly.construct_fast(d.c, d.x, False, d.axis)

    def antiderivative(self, nu: int = 1) -> scipy.interpolate.PPoly:
        a = super().antiderivative(nu)
        return scipy.interpolate.PPoly.construct_fast(a.c, a.x, False, a.axis)

    # Definite integral of the clamped function.
    # Outside the breakpoints the function is the constant boundary value.
    def integrate(self, a: float, b: float, extrapolate: Any = None) -> float:
        if b < a:
            return -self.integrate(b, a)
        lo, hi = self.x[0], self.x[-1]
        total = 0.0
        if a < lo:
            total += float(self(lo)) * (min(b, lo) - a)
        if b > hi:
            total += float(self(hi)) * (b - max(a, hi))
        start, end = max(a, lo), min(b, hi)
        if start < end:
            total += float(super().integrate(start, end, extrapolate=False))
        return total

    # Solutions of f(x) = y within the breakpoints. The constant continuation
    # outside is not searched; roots() goes through here as well.
    def solve(
        self, y: float = 0.0, discontinuity: bool = True, extrapolate: Any = None
    ) -> numpy.ndarray:
        return super().solve(y, discontinuity, extrapolate=False)

    # Allow conversion to a string, formatting the piecewise function into a readable format.
    def __str__(self) -> str:
        result = ""
        x = ["{:.2f}".format(val) for val in self.x]
        maxlen = max([len(val) for val in x])
        for i, val in enumerate(self.c.T):
            result += " " * (maxlen - len(x[i])) + x[i]
            result += " - "
            result += " " * (maxlen - len(x[i + 1])) + x[i + 1]
            result += ": "
            result += " + ".join(
                "{:.6g}*s^{}".format(c, len(val) - 1 - j) for j, c in enumerate(val)
            )
            result += "\n"
        return result


def to_ppoly(interp: FittedInterpolant) -> ClampedPPoly:
    """
    Convert a fitted interpolant into a ClampedPPoly.

    Each segment's Hermite form is expanded into powers of ``u - x[k]``, the
    local variable scipy's PPoly uses. The result agrees with ``evaluate`` up
    to floating-point rounding; unlike ``evaluate`` it does not return stored
    sample values verbatim.

    An interpolant without samples becomes a single zero piece on [0, 1] and
    one with a single sample a constant piece on [x0, x0 + 1].
    """
    if interp.n == 0:
        return ClampedPPoly([0.0, 1.0], [[EMPTY_VALUE]])
    if interp.n == 1:
        x0 = float(interp.x[0])
        return ClampedPPoly([x0, x0 + 1.0], [[float(interp.y[0])]])

    columns = [
        hermite_power_coefficients(
            interp.y[k], interp.y[k + 1], interp.m[k], interp.m[k + 1], interp.dx[k]
        )
        for k in range(interp.n - 1)
    ]
    return ClampedPPoly(interp.x, numpy.array(columns).T)
