"""
Analysis Module

Monotonicity checks and printed segment reports for fitted interpolants.
"""

from .inspection import (
    SegmentInfo,
    find_monotonicity_violations,
    is_monotone,
    print_segment_table,
    segment_table,
)

__all__ = [
    "SegmentInfo",
    "find_monotonicity_violations",
    "is_monotone",
    "print_segment_table",
    "segment_table",
]
