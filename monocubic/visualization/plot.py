"""
Visualization Module

Plots fitted interpolants together with their samples.
"""

from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..core.basis import hermite_basis
from ..core.evaluator import evaluate_many
from ..core.interpolant import FittedInterpolant


def unlimited_hermite_values(interp: FittedInterpolant, us: np.ndarray) -> np.ndarray:
    """
    Cubic Hermite curve through the same samples without tangent limiting.

    Tangents are the plain averaged secants (one-sided at the ends), which is
    what the builder starts from. Useful to show the overshoot the limiting
    removes. Clamped outside the domain like the limited curve.
    """
    us = np.asarray(us, dtype=float)
    if interp.n < 2:
        return evaluate_many(interp, us)

    x, y, dx, delta = interp.x, interp.y, interp.dx, interp.delta
    m = np.empty(interp.n)
    m[1:-1] = (delta[:-1] + delta[1:]) / 2
    m[0] = delta[0]
    m[-1] = delta[-1]

    uc = np.clip(us, x[0], x[-1])
    k = np.clip(np.searchsorted(x, uc, side="right") - 1, 0, interp.n - 2)
    t = (uc - x[k]) / dx[k]
    b00, b10, b01, b11 = hermite_basis(t)
    return y[k] * b00 + dx[k] * m[k] * b10 + y[k + 1] * b01 + dx[k] * m[k + 1] * b11


def plot_interpolant(
    interp: FittedInterpolant,
    num_points: int = 200,
    figsize: Tuple[float, float] = (12, 6),
    show_unlimited: bool = False,
    margin: float = 0.0,
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Plot an interpolant and its samples.

    Parameters
    ----------
    interp : FittedInterpolant
        Curve to plot, must have at least one sample
    num_points : int, optional
        Number of points to sample the curve at (default: 200)
    figsize : Tuple[float, float], optional
        Figure size in inches (default: (12, 6))
    show_unlimited : bool, optional
        Also draw the cubic Hermite curve without tangent limiting (default: False)
    margin : float, optional
        Fraction of the domain width to plot beyond each end, showing the
        clamped extrapolation (default: 0.0)
    title : str, optional
        Plot title (default: auto-generated)

    Returns
    -------
    plt.Figure
        The matplotlib figure

    Raises
    ------
    ValueError
        If the interpolant has no samples.
    """
    if interp.n == 0:
        raise ValueError("Cannot plot an interpolant without samples.")

    x_min, x_max = interp.domain
    width = (x_max - x_min) or 1.0
    us = np.linspace(x_min - margin * width, x_max + margin * width, num_points)

    fig, ax = plt.subplots(figsize=figsize)

    if show_unlimited:
        ax.plot(
            us,
            unlimited_hermite_values(interp, us),
            color="tab:gray",
            linewidth=1.5,
            linestyle="--",
            alpha=0.7,
            label="Cubic Hermite (unlimited)",
        )

    ax.plot(
        us,
        evaluate_many(interp, us),
        color="tab:blue",
        linewidth=2.5,
        label="Monotone cubic",
    )
    ax.plot(
        interp.x,
        interp.y,
        marker="s",
        linewidth=0,
        color="black",
        label="Samples",
    )

    ax.set_xlabel("x", fontsize=12, fontweight="bold")
    ax.set_ylabel("y", fontsize=12, fontweight="bold")
    if title is None:
        title = f"Monotone Cubic Interpolation ({interp.n} samples)"
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.3, linestyle=":")
    ax.legend(loc="best", framealpha=0.9)

    plt.tight_layout()
    return fig
