"""
Interpolant Inspection

Helpers to check a fitted interpolant for monotonicity and to print a
human-readable description of its segments.
"""

from typing import List, NamedTuple, Sequence, Tuple

import numpy

from ..core.evaluator import evaluate_many
from ..core.interpolant import FittedInterpolant


class SegmentInfo(NamedTuple):
    """
    Geometry and tangents of one segment.

    Attributes
    ----------
    x_start, x_end : float
        Bounding sample positions.
    delta : float
        Secant slope of the samples.
    m_start, m_end : float
        Limited tangents at both ends.
    """

    x_start: float
    x_end: float
    delta: float
    m_start: float
    m_end: float

    @property
    def alpha(self) -> float:
        return self.m_start / self.delta if self.delta != 0 else 0.0

    @property
    def beta(self) -> float:
        return self.m_end / self.delta if self.delta != 0 else 0.0


def is_monotone(values: Sequence[float], increasing: bool = True) -> bool:
    """True if the sequence never decreases (or, with increasing=False, never increases)."""
    diffs = numpy.diff(numpy.asarray(values, dtype=float))
    if increasing:
        return bool(numpy.all(diffs >= 0))
    return bool(numpy.all(diffs <= 0))


def segment_table(interp: FittedInterpolant) -> List[SegmentInfo]:
    """One SegmentInfo per segment; empty for fewer than two samples."""
    return [
        SegmentInfo(
            float(interp.x[k]),
            float(interp.x[k + 1]),
            float(interp.delta[k]),
            float(interp.m[k]),
            float(interp.m[k + 1]),
        )
        for k in range(interp.n - 1)
    ]


def find_monotonicity_violations(
    interp: FittedInterpolant, step: float, atol: float = 1e-12
) -> List[Tuple[float, float]]:
    """
    Sample every segment and report where the curve moves against the data.

    Each segment is sampled at spacing ``step`` (plus both end points). For a
    segment whose samples increase, every adjacent pair of sampled values
    must be non-decreasing, and non-increasing for decreasing samples. Flat
    segments must stay flat. Movements up to atol are tolerated.

    Parameters
    ----------
    interp : FittedInterpolant
    step : float
        Sampling distance, must be positive.
    atol : float, optional
        Absolute tolerance for rounding noise (default: 1e-12)

    Returns
    -------
    List[Tuple[float, float]]
        Positions ``(u1, u2)`` of every offending adjacent pair.

    Raises
    ------
    ValueError
        If step is not positive.
    """
    if step <= 0:
        raise ValueError("step must be positive")

    violations: List[Tuple[float, float]] = []
    for seg in segment_table(interp):
        us = numpy.append(numpy.arange(seg.x_start, seg.x_end, step), seg.x_end)
        diffs = numpy.diff(evaluate_many(interp, us))
        if seg.delta > 0:
            bad = numpy.flatnonzero(diffs < -atol)
        elif seg.delta < 0:
            bad = numpy.flatnonzero(diffs > atol)
        else:
            bad = numpy.flatnonzero(numpy.abs(diffs) > atol)
        violations.extend((float(us[i]), float(us[i + 1])) for i in bad)
    return violations


def print_segment_table(interp: FittedInterpolant):
    """
    Print the segments of an interpolant.

    Examples
    --------
    >>> print_segment_table(build([0, 1, 2], [0, 1, 4]))
    Segments:
    ----------------------------------------------------------------------
    [    0.00 -     1.00]: delta=    1.0000  m=(    1.0000,     2.0000)
    [    1.00 -     2.00]: delta=    3.0000  m=(    2.0000,     3.0000)
    ----------------------------------------------------------------------
    Samples: 3
    """
    print("Segments:")
    print("-" * 70)

    rows = segment_table(interp)
    if not rows:
        print("  No segments (fewer than two samples)")

    for seg in rows:
        print(
            f"[{seg.x_start:8.2f} - {seg.x_end:8.2f}]: delta={seg.delta:10.4f}"
            f"  m=({seg.m_start:10.4f}, {seg.m_end:10.4f})"
        )

    print("-" * 70)
    print(f"Samples: {interp.n}")
