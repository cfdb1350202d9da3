"""
Cubic Hermite basis functions.

The four polynomials combine the endpoint values and endpoint tangents of a
segment into the interpolated value at the normalized position t in [0, 1].
All functions work elementwise on numpy arrays as well as on plain floats.
"""

from typing import Any, Tuple


def h00(t: Any) -> Any:
    return (1 + 2 * t) * (1 - t) ** 2


def h10(t: Any) -> Any:
    return t * (1 - t) ** 2


def h01(t: Any) -> Any:
    return t**2 * (3 - 2 * t)


def h11(t: Any) -> Any:
    return t**2 * (t - 1)


def hermite_basis(t: Any) -> Tuple[Any, Any, Any, Any]:
    """Return ``(h00(t), h10(t), h01(t), h11(t))``."""
    return h00(t), h10(t), h01(t), h11(t)


# Expand the Hermite form of one segment into descending powers of s = u - x_k.
# Used to hand the segment over to scipy's PPoly, which stores exactly this form.
def hermite_power_coefficients(
    y0: float, y1: float, m0: float, m1: float, dx: float
) -> Tuple[float, float, float, float]:
    """
    Power-basis coefficients of a cubic Hermite segment.

    Parameters
    ----------
    y0, y1 : float
        Values at the left and right end of the segment.
    m0, m1 : float
        Tangents at the left and right end of the segment.
    dx : float
        Segment width, must be non-zero.

    Returns
    -------
    Tuple[float, float, float, float]
        ``(c3, c2, c1, c0)`` such that the segment equals
        ``c3*s**3 + c2*s**2 + c1*s + c0`` with ``s = u - x_k``.
    """
    delta = (y1 - y0) / dx
    c3 = (m0 + m1 - 2 * delta) / dx**2
    c2 = (3 * delta - 2 * m0 - m1) / dx
    return c3, c2, m0, y0


def hermite_basis_derivative(t: Any) -> Tuple[Any, Any, Any, Any]:
    """Derivatives of the four basis functions with respect to t."""
    return (
        6 * t**2 - 6 * t,
        3 * t**2 - 4 * t + 1,
        6 * t - 6 * t**2,
        3 * t**2 - 2 * t,
    )
