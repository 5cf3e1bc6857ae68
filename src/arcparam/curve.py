"""Cubic Bezier curve queryable by native parameter or by distance traveled."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from arcparam.arc_length import ArcLengthTable
from arcparam.bezier import BezierCurve
from arcparam.common import (
    ArcLengthConfig,
    ControlPointsLike,
    InvalidSampleCountError,
    PointLike,
)

logger = logging.getLogger(__name__)


class CubicCurve:
    """Arc-length parametrized cubic Bezier curve.

    The curve is defined by a start point P0, two control handles P1 and P2 and
    an end point P3 of any common dimension. The native parameter t advances
    non-uniformly along the curve; an ArcLengthTable built once at construction
    maps distance traveled back to t so that points can also be queried by
    absolute length or by fraction of the total length.

    Instances are immutable: the control points are copied and stored
    read-only, and the table is never rebuilt. A different shape needs a new
    CubicCurve.

    Attributes:
        _points: Control points P0..P3, read-only array of shape (4, dim)
        _table: Cumulative arc length table
    """

    def __init__(
        self,
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        p3: PointLike,
        config: Optional[ArcLengthConfig] = None,
    ):
        """Initialize the curve and build its arc length table.

        Args:
            p0: Start point
            p1: First control handle
            p2: Second control handle
            p3: End point
            config: Arc length table settings, DEFAULT_ARC_LENGTH_CONFIG if omitted

        Raises:
            InvalidControlPointsError: If the points are not finite or differ in dimension,
                or the curve is too large for its length to be finite.
        """
        points = BezierCurve.as_control_points([p0, p1, p2, p3])
        points.flags.writeable = False
        self._points = points
        self._table = ArcLengthTable.from_control_points(points, config)

        if self._table.total_length == 0.0:
            logger.debug("Curve has zero length, all length queries return %s", points[0])

    @classmethod
    def from_points(cls, points: ControlPointsLike, config: Optional[ArcLengthConfig] = None) -> CubicCurve:
        """Create a curve from a sequence or array of the four control points."""
        points_array = BezierCurve.as_control_points(points)
        return cls(points_array[0], points_array[1], points_array[2], points_array[3], config)

    ###########################################################################
    # Properties
    ###########################################################################

    @property
    def control_points(self) -> NDArray[np.float64]:
        """Read-only control points P0..P3 as array of shape (4, dim)."""
        return self._points

    @property
    def start_point(self) -> NDArray[np.float64]:
        """Read-only start point P0."""
        return self._points[0]

    @property
    def end_point(self) -> NDArray[np.float64]:
        """Read-only end point P3."""
        return self._points[3]

    @property
    def dimension(self) -> int:
        """int: Number of coordinates per point."""
        return self._points.shape[1]

    @property
    def arc_length_table(self) -> ArcLengthTable:
        """The cumulative arc length table of this curve."""
        return self._table

    @property
    def length(self) -> float:
        """float: Total length of the curve as approximated by the arc length table."""
        return self._table.total_length

    ###########################################################################
    # Point queries
    ###########################################################################

    def point_at_parameter(self, t: float) -> NDArray[np.float64]:
        """
        Evaluate the curve at native parameter t.

        t is not clamped, values outside [0, 1] extrapolate the curve.

        Args:
            t: Native curve parameter

        Returns:
            NDArray[np.float64] of shape (dim,)
        """
        return BezierCurve.evaluate_cubic(self._points, float(t))

    def parameter_at_length(self, length: float) -> float:
        """Native parameter reached after traveling length along the curve (clamped)."""
        return self._table.parameter_at_length(length)

    def parameter_at_fraction(self, fraction: float) -> float:
        """Native parameter reached after traveling fraction of the total length (clamped)."""
        return self._table.parameter_at_length(float(fraction) * self.length)

    def length_at_parameter(self, t: float) -> float:
        """Distance traveled from the start up to native parameter t (clamped to [0, 1])."""
        return self._table.length_at_parameter(t)

    def point_at_length(self, length: float) -> NDArray[np.float64]:
        """
        Evaluate the curve after traveling the given distance from its start.

        Lengths below 0 or beyond the total length are clamped to the
        nearest endpoint.

        Args:
            length: Distance along the curve

        Returns:
            NDArray[np.float64] of shape (dim,)
        """
        return BezierCurve.evaluate_cubic(self._points, self.parameter_at_length(length))

    def point_at_fraction(self, fraction: float) -> NDArray[np.float64]:
        """
        Evaluate the curve after traveling fraction * length from its start.

        Args:
            fraction: Share of the total length, expected in [0, 1]; other values are clamped

        Returns:
            NDArray[np.float64] of shape (dim,)
        """
        return self.point_at_length(float(fraction) * self.length)

    ###########################################################################
    # Sampling
    ###########################################################################

    @staticmethod
    def _check_sample_count(count: int) -> int:
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
            raise InvalidSampleCountError(f"Sample count must be an integer, got {type(count).__name__}")
        if count < 2:
            raise InvalidSampleCountError(f"Sample count must be at least 2, got {count}")
        return int(count)

    def _anchor_endpoints(self, samples: NDArray[np.float64]) -> NDArray[np.float64]:
        samples[0] = self._points[0]
        samples[-1] = self._points[3]
        return samples

    def uniform_parameter_samples(self, count: int) -> NDArray[np.float64]:
        """
        Sample the curve at evenly spaced native parameters t = i / (count - 1).

        Args:
            count: Number of points, at least 2

        Returns:
            NDArray[np.float64] of shape (count, dim), first point P0, last point P3

        Raises:
            InvalidSampleCountError: If count is not an integer >= 2.
        """
        count = self._check_sample_count(count)
        t = np.arange(count, dtype=np.float64) / (count - 1)
        return self._anchor_endpoints(BezierCurve.evaluate_cubic_many(self._points, t))

    def uniform_arc_length_samples(self, count: int) -> NDArray[np.float64]:
        """
        Sample the curve at points spaced evenly in arc length (equidistant points).

        Args:
            count: Number of points, at least 2

        Returns:
            NDArray[np.float64] of shape (count, dim), first point P0, last point P3

        Raises:
            InvalidSampleCountError: If count is not an integer >= 2.
        """
        count = self._check_sample_count(count)
        lengths = np.arange(count, dtype=np.float64) / (count - 1) * self.length
        t = self._table.parameters_at_lengths(lengths)
        return self._anchor_endpoints(BezierCurve.evaluate_cubic_many(self._points, t))

    ###########################################################################
    # Comparison
    ###########################################################################

    def approx_equal(self, other: CubicCurve, rtol: float = 1e-9, atol: float = 1e-9) -> bool:
        """Check whether other has approximately the same control points.

        Args:
            other: Curve to compare with
            rtol: Relative tolerance passed to numpy.allclose
            atol: Absolute tolerance passed to numpy.allclose

        Returns:
            bool: True if both curves have the same dimension and close control points
        """
        if not isinstance(other, CubicCurve):
            return False
        if self._points.shape != other.control_points.shape:
            return False
        return bool(np.allclose(self._points, other.control_points, rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        return f"CubicCurve(control_points={self._points.tolist()}, length={self.length})"


def main():
    """Main"""
    curve = CubicCurve((0.0, 300.0), (440.0, 0.0), (-200.0, 0.0), (240.0, 300.0))
    print(curve)
    print("uniform parameter samples:")
    print(curve.uniform_parameter_samples(5))
    print("uniform arc length samples:")
    print(curve.uniform_arc_length_samples(5))


if __name__ == "__main__":
    main()
