"""
This module compares points sampled evenly in the native Bezier parameter with
points sampled evenly in arc length on the same cubic curve.

The gaps between consecutive uniform-parameter points vary with the speed of
the curve, while the gaps between arc-length points stay nearly constant.
"""

from typing import List, Tuple

import numpy as np

from arcparam.curve import CubicCurve

# A curve with a strongly varying speed, bowing out between its end points
CONTROL_POINTS = ((0.0, 300.0), (440.0, 0.0), (-200.0, 0.0), (240.0, 300.0))


def gap_statistics(points: np.ndarray) -> Tuple[float, float]:
    """
    Returns the smallest and largest distance between consecutive points.

    Args:
    - points (np.ndarray): Points of shape (n, dim) with n >= 2.

    Returns:
    - Tuple[float, float]: (min_gap, max_gap)
    """
    gaps = np.linalg.norm(np.diff(points, axis=0), axis=1)
    return float(gaps.min()), float(gaps.max())


def compare_samplings(curve: CubicCurve, counts: List[int]) -> List[Tuple[int, float, float, float, float]]:
    """Gap statistics per sample count: (count, param_min, param_max, arc_min, arc_max)."""
    rows = []
    for count in counts:
        param_min, param_max = gap_statistics(curve.uniform_parameter_samples(count))
        arc_min, arc_max = gap_statistics(curve.uniform_arc_length_samples(count))
        rows.append((count, param_min, param_max, arc_min, arc_max))
    return rows


def main():
    """Main function to print the gap statistics of both samplings."""
    curve = CubicCurve(*CONTROL_POINTS)
    print(f"Curve length: {curve.length:.3f}")
    print(f"Straight-line distance: {float(np.linalg.norm(curve.end_point - curve.start_point)):.3f}")
    print()
    print(" count |  param min  |  param max  |   arc min   |   arc max")
    print("-" * 64)
    for count, param_min, param_max, arc_min, arc_max in compare_samplings(curve, [2, 3, 10, 20, 80]):
        print(f"{count:6d} | {param_min:11.3f} | {param_max:11.3f} | {arc_min:11.3f} | {arc_max:11.3f}")


if __name__ == "__main__":
    main()
