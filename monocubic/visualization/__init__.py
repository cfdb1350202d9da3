"""
Visualization Module

Provides plotting utilities for fitted interpolants.
"""

from .plot import plot_interpolant, unlimited_hermite_values

__all__ = [
    "plot_interpolant",
    "unlimited_hermite_values",
]
