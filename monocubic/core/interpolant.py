"""
Fitted interpolant value type.

A FittedInterpolant is the compiled form of a monotone cubic curve: the
sorted samples, the segment geometry and the limited tangents. It never
changes after construction, so one instance can be evaluated repeatedly and
from several threads at once.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

import numpy


def _frozen(values: Any) -> numpy.ndarray:
    arr = numpy.array(values, dtype=float)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class FittedInterpolant:
    """
    Immutable monotone cubic interpolant.

    Attributes
    ----------
    x : numpy.ndarray, shape (n,)
        Sample x-coordinates, strictly increasing.
    y : numpy.ndarray, shape (n,)
        Sample values, paired with ``x``.
    dx : numpy.ndarray, shape (n-1,)
        Segment widths ``x[k+1] - x[k]``.
    delta : numpy.ndarray, shape (n-1,)
        Segment secant slopes ``(y[k+1] - y[k]) / dx[k]``.
    m : numpy.ndarray, shape (n,)
        Limited tangent at every sample.
    n : int
        Number of samples.
    """

    x: numpy.ndarray
    y: numpy.ndarray
    dx: numpy.ndarray
    delta: numpy.ndarray
    m: numpy.ndarray
    n: int

    @classmethod
    def create(
        cls, x: Any, y: Any, dx: Any, delta: Any, m: Any
    ) -> "FittedInterpolant":
        """Bundle the given arrays as read-only copies."""
        x = _frozen(x)
        return cls(x, _frozen(y), _frozen(dx), _frozen(delta), _frozen(m), len(x))

    # Two interpolants are equal when all their arrays hold the same values.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FittedInterpolant):
            return NotImplemented
        return all(
            numpy.array_equal(getattr(self, f.name), getattr(other, f.name))
            for f in fields(self)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def domain(self) -> tuple[float, float] | None:
        """``(x_min, x_max)`` of the samples, or None without samples."""
        if self.n == 0:
            return None
        return float(self.x[0]), float(self.x[-1])

    # Call operator.
    # Evaluates the curve at a scalar or, for array-like input, elementwise.
    def __call__(self, u: Any) -> Any:
        from .evaluator import evaluate, evaluate_many

        if numpy.ndim(u) == 0:
            return evaluate(self, u)
        return evaluate_many(self, u)

    def __str__(self) -> str:
        if self.n == 0:
            return "FittedInterpolant(empty)"
        if self.n == 1:
            return "FittedInterpolant(constant {:.4g})".format(self.y[0])
        return "FittedInterpolant({} samples on [{:.4g}, {:.4g}])".format(
            self.n, self.x[0], self.x[-1]
        )
