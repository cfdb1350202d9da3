"""
monocubic Core Module

This module provides the numeric components of monocubic:
- Cubic Hermite basis functions
- The fitted interpolant value type
- The builder limiting tangents for monotonicity
- The evaluator and the scipy PPoly export
"""

from .basis import (
    h00,
    h01,
    h10,
    h11,
    hermite_basis,
    hermite_basis_derivative,
    hermite_power_coefficients,
)
from .builder import EMPTY_VALUE, OVERSHOOT_RADIUS, build, initial_tangents, limit_tangents
from .evaluator import evaluate, evaluate_derivative, evaluate_many, locate_segment
from .interpolant import FittedInterpolant
from .ppoly import ClampedPPoly, to_ppoly

__all__ = [
    # Basis
    "h00",
    "h10",
    "h01",
    "h11",
    "hermite_basis",
    "hermite_basis_derivative",
    "hermite_power_coefficients",
    # Builder
    "build",
    "initial_tangents",
    "limit_tangents",
    "EMPTY_VALUE",
    "OVERSHOOT_RADIUS",
    # Evaluator
    "evaluate",
    "evaluate_many",
    "evaluate_derivative",
    "locate_segment",
    # Types
    "FittedInterpolant",
    "ClampedPPoly",
    "to_ppoly",
]
