"""Cubic Bezier evaluation utilities for arc-length parametrization."""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from arcparam.common import ControlPointsLike, InvalidControlPointsError

# Below this step count the pure Python sampler is faster than NumPy
_PYTHON_STEPS_LIMIT: int = 70


class BezierCurve:
    """Class to handle cubic Bezier curve evaluation.

    All methods are stateless. Control points are given as four points
    (start, control1, control2, end) of any common dimension, either as a
    sequence of coordinate sequences or as an array of shape (4, dim).
    """

    @staticmethod
    def as_control_points(points: ControlPointsLike) -> NDArray[np.float64]:
        """Validate control points and return them as a new float64 array of shape (4, dim).

        Args:
            points: Four points of equal dimension: start, control1, control2, end

        Returns:
            NDArray[np.float64] of shape (4, dim), never sharing memory with the input

        Raises:
            InvalidControlPointsError: If there are not exactly four points, the points
                differ in dimension, have no coordinates, or contain non-finite values.
        """
        try:
            points_array = np.array(points, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidControlPointsError(f"Control points must be numeric points of equal dimension: {exc}") from exc

        if points_array.ndim != 2:
            raise InvalidControlPointsError(
                f"Control points must have shape (4, dim), got array with {points_array.ndim} dimensions"
            )
        if points_array.shape[0] != 4:
            raise InvalidControlPointsError(f"A cubic Bezier curve needs 4 control points, got {points_array.shape[0]}")
        if points_array.shape[1] < 1:
            raise InvalidControlPointsError("Control points must have at least one coordinate")
        if not np.all(np.isfinite(points_array)):
            raise InvalidControlPointsError("Control points must be finite")
        return points_array

    @staticmethod
    def _lerp(a, b, t: float):
        """Linear interpolation that returns a at t=0, b at t=1 and a when a == b."""
        if t <= 0.5:
            return a + t * (b - a)
        return b - (1.0 - t) * (b - a)

    @staticmethod
    def _lerp_many(a: NDArray[np.float64], b: NDArray[np.float64], t: NDArray[np.float64]) -> NDArray[np.float64]:
        """Vectorized _lerp for parameters of shape (n, 1)."""
        delta = b - a
        return np.where(t <= 0.5, a + t * delta, b - (1.0 - t) * delta)

    @classmethod
    def evaluate_cubic(cls, points: NDArray[np.float64], t: float) -> NDArray[np.float64]:
        """
        Evaluate a cubic Bezier curve at parameter t.

        B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3,
        computed for all axes at once by repeated linear interpolation
        (de Casteljau). B(0) is P0 and B(1) is P3 exactly, and coincident
        control points give that point for every t. t outside [0, 1] extrapolates.

        Args:
            points: Control points as NDArray[np.float64] of shape (4, dim)
            t: Curve parameter

        Returns:
            NDArray[np.float64] of shape (dim,)
        """
        p01 = cls._lerp(points[0], points[1], t)
        p12 = cls._lerp(points[1], points[2], t)
        p23 = cls._lerp(points[2], points[3], t)
        return cls._lerp(cls._lerp(p01, p12, t), cls._lerp(p12, p23, t), t)

    @classmethod
    def evaluate_cubic_python(cls, points: ControlPointsLike, t: float) -> Tuple[float, ...]:
        """Evaluate a cubic Bezier curve at parameter t axis by axis using pure Python."""
        pt0, pt1, pt2, pt3 = points
        result = []
        for c0, c1, c2, c3 in zip(pt0, pt1, pt2, pt3):
            c01 = cls._lerp(float(c0), float(c1), t)
            c12 = cls._lerp(float(c1), float(c2), t)
            c23 = cls._lerp(float(c2), float(c3), t)
            result.append(cls._lerp(cls._lerp(c01, c12, t), cls._lerp(c12, c23, t), t))
        return tuple(result)

    @classmethod
    def evaluate_cubic_many(cls, points: NDArray[np.float64], ts: NDArray[np.float64]) -> NDArray[np.float64]:
        """
        Evaluate a cubic Bezier curve at many parameters using vectorized operations.

        Args:
            points: Control points as NDArray[np.float64] of shape (4, dim)
            ts: Curve parameters, shape (n,)

        Returns:
            NDArray[np.float64] of shape (n, dim)
        """
        t = np.asarray(ts, dtype=np.float64)[:, np.newaxis]

        p01 = cls._lerp_many(points[0], points[1], t)
        p12 = cls._lerp_many(points[1], points[2], t)
        p23 = cls._lerp_many(points[2], points[3], t)
        return cls._lerp_many(cls._lerp_many(p01, p12, t), cls._lerp_many(p12, p23, t), t)

    @classmethod
    def polygonize_cubic_curve_python(cls, points: NDArray[np.float64], steps: int) -> NDArray[np.float64]:
        """Sample a cubic Bezier curve at t = i / steps (i = 0..steps) using pure Python."""
        samples = [cls.evaluate_cubic_python(points, i / steps) for i in range(steps + 1)]
        return np.array(samples, dtype=np.float64).reshape(steps + 1, points.shape[1])

    @classmethod
    def polygonize_cubic_curve_numpy(cls, points: NDArray[np.float64], steps: int) -> NDArray[np.float64]:
        """Sample a cubic Bezier curve at t = i / steps (i = 0..steps) using NumPy."""
        # arange / steps yields exactly i / steps, including t = 1.0 at the end
        t = np.arange(steps + 1, dtype=np.float64) / steps
        return cls.evaluate_cubic_many(points, t)

    @classmethod
    def polygonize_cubic_curve(cls, points: ControlPointsLike, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve into steps line segments.
        Uses pure Python for small step counts, NumPy for larger ones.

        Args:
            points: Control points, must contain exactly 4 points: start, control1, control2, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, dim) sampled at evenly spaced parameters

        Raises:
            ValueError: If steps is smaller than 1
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        points_array = cls.as_control_points(points)
        if steps < _PYTHON_STEPS_LIMIT:
            return cls.polygonize_cubic_curve_python(points_array, steps)
        return cls.polygonize_cubic_curve_numpy(points_array, steps)
