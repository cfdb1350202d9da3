"""
Monotone Cubic Interpolant Evaluator

Pure functions evaluating a FittedInterpolant. Queries outside the sampled
domain are clamped to the first/last sample value; queries landing exactly on
a sample return the stored sample value without going through the cubic.
"""

import bisect
import math
from typing import Any

import numpy

from .basis import hermite_basis, hermite_basis_derivative
from .builder import EMPTY_VALUE
from .interpolant import FittedInterpolant


def evaluate(interp: FittedInterpolant, u: float) -> float:
    """
    Evaluate the interpolant at a single position.

    Parameters
    ----------
    interp : FittedInterpolant
        Curve returned by ``build``.
    u : float
        Query position. Any real value is accepted; NaN yields NaN.

    Returns
    -------
    float
        ``y[0]`` for ``u <= x[0]``, ``y[-1]`` for ``u >= x[-1]``, the stored
        sample value when u hits a sample, and the cubic Hermite value of the
        enclosing segment otherwise.
    """
    if interp.n == 0:
        return EMPTY_VALUE
    if interp.n == 1:
        return float(interp.y[0])

    u = float(u)
    if math.isnan(u):
        return math.nan
    if u >= interp.x[-1]:
        return float(interp.y[-1])
    if u <= interp.x[0]:
        return float(interp.y[0])

    k = bisect.bisect_right(interp.x, u) - 1
    if interp.x[k] == u:
        return float(interp.y[k])
    return _segment_value(interp, k, u)


def locate_segment(interp: FittedInterpolant, u: float) -> int:
    """
    Index k of the segment with ``x[k] <= u < x[k+1]``.

    Positions on or beyond the last sample belong to the last segment and
    positions before the first sample to the first one.

    Raises
    ------
    ValueError
        If the interpolant has fewer than two samples or u is NaN.
    """
    if interp.n < 2:
        raise ValueError("An interpolant needs at least two samples to have segments.")
    if math.isnan(u):
        raise ValueError("Cannot locate the segment of a NaN position.")
    k = bisect.bisect_right(interp.x, u) - 1
    return min(max(k, 0), interp.n - 2)


def _segment_value(interp: FittedInterpolant, k: int, u: float) -> float:
    dx = interp.dx[k]
    t = (u - interp.x[k]) / dx
    b00, b10, b01, b11 = hermite_basis(t)
    return float(
        interp.y[k] * b00
        + dx * interp.m[k] * b10
        + interp.y[k + 1] * b01
        + dx * interp.m[k + 1] * b11
    )


def evaluate_many(interp: FittedInterpolant, us: Any) -> numpy.ndarray:
    """
    Evaluate the interpolant elementwise on an array of positions.

    Same results as calling ``evaluate`` on every element, including the
    clamping outside the domain and exact values at samples.

    Parameters
    ----------
    interp : FittedInterpolant
    us : array_like
        Query positions of any shape.

    Returns
    -------
    numpy.ndarray
        Values with the shape of ``us``.
    """
    us = numpy.asarray(us, dtype=float)
    if interp.n == 0:
        return numpy.full(us.shape, EMPTY_VALUE)
    if interp.n == 1:
        return numpy.full(us.shape, float(interp.y[0]))

    x, y = interp.x, interp.y
    k = numpy.clip(numpy.searchsorted(x, us, side="right") - 1, 0, interp.n - 2)
    dx = interp.dx[k]
    # clipped positions keep t finite for queries at +-inf
    t = (numpy.clip(us, x[0], x[-1]) - x[k]) / dx
    b00, b10, b01, b11 = hermite_basis(t)
    values = (
        y[k] * b00
        + dx * interp.m[k] * b10
        + y[k + 1] * b01
        + dx * interp.m[k + 1] * b11
    )

    values = numpy.where(x[k] == us, y[k], values)
    values = numpy.where(us <= x[0], y[0], values)
    values = numpy.where(us >= x[-1], y[-1], values)
    return values


def evaluate_derivative(interp: FittedInterpolant, u: float) -> float:
    """
    First derivative of the interpolant at u.

    Zero outside the sampled domain and for interpolants with fewer than two
    samples. At a sample the limited tangent stored for it is returned.
    """
    if interp.n < 2:
        return 0.0

    u = float(u)
    if math.isnan(u):
        return math.nan
    if u < interp.x[0] or u > interp.x[-1]:
        return 0.0

    k = bisect.bisect_right(interp.x, u) - 1
    if interp.x[k] == u:
        return float(interp.m[k])

    dx = interp.dx[k]
    t = (u - interp.x[k]) / dx
    d00, d10, d01, d11 = hermite_basis_derivative(t)
    return float(
        (interp.y[k] * d00 + interp.y[k + 1] * d01) / dx
        + interp.m[k] * d10
        + interp.m[k + 1] * d11
    )
