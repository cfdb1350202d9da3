#!/usr/bin/env python3
"""
Simple Example - monocubic

Demonstrates building and evaluating monotone cubic interpolants.
"""

import numpy

from monocubic import (
    build,
    find_monotonicity_violations,
    plot_interpolant,
    print_segment_table,
)


def example1_squares(visualize=False):
    """Example 1: samples of the square function."""

    f = build([0, 1, 2, 3, 4], [0, 1, 4, 9, 16])

    print_segment_table(f)
    for u in numpy.arange(0.0, 4.5, 0.5):
        print(f"{u:4.1f} squared is about {f(u):8.4f}")

    if visualize:
        print("\nGenerating visualization...")
        fig = plot_interpolant(f, margin=0.1, title="Squares")
        fig.savefig("example_squares.png", dpi=150, bbox_inches="tight")
        print("Saved: example_squares.png")

    return f


def example2_overshoot(visualize=False):
    """Example 2: data where clamping alpha and beta separately overshoots."""

    f = build([0, 0.30, 0.5], [0, 0.05, 0.5])

    for u in numpy.arange(0.0, 0.51, 0.01):
        print(f"{u:5.2f} {f(u):.6f}")

    violations = find_monotonicity_violations(f, 0.01)
    print(f"Monotonicity violations: {len(violations)}")

    if visualize:
        print("\nGenerating visualization...")
        fig = plot_interpolant(f, show_unlimited=True, title="Overshoot Regression")
        fig.savefig("example_overshoot.png", dpi=150, bbox_inches="tight")
        print("Saved: example_overshoot.png")

    return f


if __name__ == "__main__":
    print("\n" + "#" * 70)
    print("#  monocubic - Simple Examples")
    print("#" * 70)

    example1_squares(visualize=True)
    print()
    example2_overshoot(visualize=True)
