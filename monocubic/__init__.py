"""monocubic - monotone cubic interpolation"""

import logging

# Analysis tools
from .analysis import (
    SegmentInfo,
    find_monotonicity_violations,
    is_monotone,
    print_segment_table,
    segment_table,
)

# Core algorithms and value types
from .core import (
    EMPTY_VALUE,
    ClampedPPoly,
    FittedInterpolant,
    build,
    evaluate,
    evaluate_derivative,
    evaluate_many,
    locate_segment,
    to_ppoly,
)

# Visualization
from .visualization import plot_interpolant

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core
    "build",
    "evaluate",
    "evaluate_many",
    "evaluate_derivative",
    "locate_segment",
    "FittedInterpolant",
    "EMPTY_VALUE",
    # scipy export
    "ClampedPPoly",
    "to_ppoly",
    # Analysis
    "SegmentInfo",
    "is_monotone",
    "segment_table",
    "find_monotonicity_violations",
    "print_segment_table",
    # Visualization
    "plot_interpolant",
]
