"""
Monotone Cubic Interpolant Builder

Turns raw (x, y) samples into a FittedInterpolant. The tangents start out as
averaged secants and are then limited segment by segment (Fritsch-Carlson
with the circular bound) so that the curve never leaves the range of the data
on a segment where the data is monotone.
"""

import logging
import math
from typing import Any, Sequence

import numpy

from .interpolant import FittedInterpolant

logger = logging.getLogger(__name__)

# Value of the interpolant built from zero samples.
EMPTY_VALUE = 0.0

# Radius of the circle in the (alpha, beta) plane inside which a cubic
# Hermite segment is monotone.
OVERSHOOT_RADIUS = 3.0


def build(x: Sequence[float], y: Sequence[float]) -> FittedInterpolant:
    """
    Build a monotone cubic interpolant from samples.

    The samples may be given in any order; pairs are sorted by x before use.
    The caller's sequences are never modified.

    Parameters
    ----------
    x : Sequence[float]
        Sample x-coordinates. Must be pairwise distinct and finite.
    y : Sequence[float]
        Sample values, ``y[i]`` belongs to ``x[i]``. Must be finite.

    Returns
    -------
    FittedInterpolant
        The compiled curve. With no samples it evaluates to ``EMPTY_VALUE``,
        with a single sample it evaluates to that sample's value everywhere.

    Raises
    ------
    ValueError
        If x and y differ in length, are not one-dimensional, contain
        non-finite values, or x contains the same coordinate twice. Also
        raised when finite samples are so large that secants overflow.
    """
    xs, ys = _validated_samples(x, y)
    n = len(xs)

    if n == 0:
        logger.debug("Built empty interpolant")
        return FittedInterpolant.create([], [], [], [], [])
    if n == 1:
        logger.debug("Built constant interpolant y=%r", ys[0])
        return FittedInterpolant.create(xs, ys, [], [], [0.0])

    order = numpy.argsort(xs, kind="stable")
    xs = xs[order]
    ys = ys[order]

    duplicates = numpy.flatnonzero(numpy.diff(xs) == 0)
    if len(duplicates) > 0:
        raise ValueError(
            f"x-coordinates must be distinct, {float(xs[duplicates[0]])!r} "
            "occurs more than once."
        )

    with numpy.errstate(over="ignore", invalid="ignore"):
        dx = numpy.diff(xs)
        delta = numpy.diff(ys) / dx
        m = initial_tangents(delta)
        rescaled = limit_tangents(m, delta)
    if not all(numpy.all(numpy.isfinite(arr)) for arr in (dx, delta, m)):
        raise ValueError(
            "Sample magnitudes overflow the secant or tangent computation."
        )

    logger.debug(
        "Built interpolant from %d samples, %d segment(s) rescaled for overshoot",
        n,
        rescaled,
    )
    return FittedInterpolant.create(xs, ys, dx, delta, m)


def _validated_samples(x: Any, y: Any) -> tuple[numpy.ndarray, numpy.ndarray]:
    xs = numpy.array(x, dtype=float)
    ys = numpy.array(y, dtype=float)
    if xs.ndim != 1 or ys.ndim != 1:
        raise ValueError("x and y must be one-dimensional sequences.")
    if len(xs) != len(ys):
        raise ValueError(
            f"x and y must have the same length, got {len(xs)} and {len(ys)}."
        )
    if not (numpy.all(numpy.isfinite(xs)) and numpy.all(numpy.isfinite(ys))):
        raise ValueError("x and y must only contain finite values.")
    return xs, ys


def initial_tangents(delta: numpy.ndarray) -> numpy.ndarray:
    """
    Starting tangents before limiting.

    Interior tangents average the two neighbouring secants, or are zero where
    the secants change sign or one of them is flat (local extremum). The end
    tangents are the one-sided secants.

    Parameters
    ----------
    delta : numpy.ndarray, shape (n-1,)
        Segment secant slopes, n >= 2.

    Returns
    -------
    numpy.ndarray, shape (n,)
    """
    m = numpy.zeros(len(delta) + 1)
    left = delta[:-1]
    right = delta[1:]
    m[1:-1] = numpy.where(left * right <= 0, 0.0, (left + right) / 2)
    m[0] = delta[0]
    m[-1] = delta[-1]
    return m


def limit_tangents(m: numpy.ndarray, delta: numpy.ndarray) -> int:
    """
    Limit tangents in place so every segment is monotone.

    Flat segments get zero tangents at both ends. On the remaining segments
    tangents pointing against the secant are zeroed, and pairs with
    ``alpha**2 + beta**2 > 9`` are scaled back onto the circle of radius 3.
    Limiting only ever shrinks tangents towards zero, so a segment that has
    been handled stays monotone when its right neighbour is limited later.

    Parameters
    ----------
    m : numpy.ndarray, shape (n,)
        Tangents, modified in place.
    delta : numpy.ndarray, shape (n-1,)
        Segment secant slopes.

    Returns
    -------
    int
        Number of segments whose tangents were rescaled.
    """
    for k in numpy.flatnonzero(delta == 0):
        m[k] = 0.0
        m[k + 1] = 0.0

    rescaled = 0
    for k, d in enumerate(delta):
        if d == 0:
            continue

        if m[k] / d < 0:
            m[k] = 0.0
        if m[k + 1] / d < 0:
            m[k + 1] = 0.0

        alpha = m[k] / d
        beta = m[k + 1] / d
        radius_sq = alpha**2 + beta**2
        # a component-wise clamp of alpha and beta to 3 is not sufficient here
        if radius_sq > OVERSHOOT_RADIUS**2:
            tau = OVERSHOOT_RADIUS / math.sqrt(radius_sq)
            m[k] = tau * alpha * d
            m[k + 1] = tau * beta * d
            rescaled += 1
    return rescaled
