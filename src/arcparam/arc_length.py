"""Cumulative arc length table of a cubic Bezier curve and its inversion."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from arcparam.bezier import BezierCurve
from arcparam.common import (
    DEFAULT_ARC_LENGTH_CONFIG,
    ArcLengthConfig,
    ControlPointsLike,
    InvalidControlPointsError,
)

logger = logging.getLogger(__name__)


class ArcLengthTable:
    """Piecewise-linear approximation of the cumulative arc length of a curve.

    The table holds segment_count + 1 samples (t_i, s_i) with t_i = i / segment_count
    and s_i the length of the polyline through the curve points B(t_0)..B(t_i).
    The first sample is (0, 0), the last length is the total curve length and
    lengths never decrease. Both columns are read-only.

    Lengths are mapped back to parameters by searching the length column and
    linearly interpolating a fractional sample index between the two bracketing
    samples.
    """

    def __init__(self, parameters: NDArray[np.float64], lengths: NDArray[np.float64]):
        """Initialize the table from its two columns.

        Args:
            parameters: Evenly spaced parameters from 0 to 1, shape (n + 1,)
            lengths: Cumulative lengths starting at 0, shape (n + 1,)

        Raises:
            ValueError: If the columns do not describe a valid table.
        """
        parameters = np.array(parameters, dtype=np.float64)
        lengths = np.array(lengths, dtype=np.float64)

        if parameters.ndim != 1 or lengths.shape != parameters.shape:
            raise ValueError(f"parameters and lengths must be 1D of equal size, got {parameters.shape}, {lengths.shape}")
        if len(lengths) < 2:
            raise ValueError(f"Arc length table needs at least 2 samples, got {len(lengths)}")
        segment_count = len(lengths) - 1
        if not np.allclose(parameters, np.arange(segment_count + 1, dtype=np.float64) / segment_count, rtol=0.0):
            raise ValueError("Parameters must be evenly spaced from 0 to 1")
        if not np.all(np.isfinite(lengths)):
            raise ValueError("Cumulative lengths must be finite")
        if lengths[0] != 0.0:
            raise ValueError(f"First cumulative length must be 0, got {lengths[0]}")
        if np.any(np.diff(lengths) < 0.0):
            raise ValueError("Cumulative lengths must be non-decreasing")

        parameters.flags.writeable = False
        lengths.flags.writeable = False
        self._parameters = parameters
        self._lengths = lengths
        self._segment_count = segment_count
        self._total_length = float(lengths[-1])

    @classmethod
    def from_control_points(
        cls, points: ControlPointsLike, config: Optional[ArcLengthConfig] = None
    ) -> ArcLengthTable:
        """Build the table by sampling the curve at evenly spaced parameters.

        Args:
            points: The four control points of the cubic Bezier curve
            config: Table settings, DEFAULT_ARC_LENGTH_CONFIG if omitted

        Returns:
            ArcLengthTable with config.segment_count + 1 samples
        """
        config = config if config is not None else DEFAULT_ARC_LENGTH_CONFIG
        segment_count = config.segment_count

        samples = BezierCurve.polygonize_cubic_curve(points, segment_count)
        segment_lengths = np.linalg.norm(np.diff(samples, axis=0), axis=1)

        lengths = np.empty(segment_count + 1, dtype=np.float64)
        lengths[0] = 0.0
        lengths[1:] = np.cumsum(segment_lengths)
        if not math.isfinite(lengths[-1]):
            raise InvalidControlPointsError(f"Curve length is not finite, got {lengths[-1]}")
        parameters = np.arange(segment_count + 1, dtype=np.float64) / segment_count

        table = cls(parameters, lengths)
        logger.debug("Built arc length table: %d segments, total length %.6g", segment_count, table.total_length)
        return table

    @property
    def parameters(self) -> NDArray[np.float64]:
        """Read-only parameter column, shape (segment_count + 1,)."""
        return self._parameters

    @property
    def lengths(self) -> NDArray[np.float64]:
        """Read-only cumulative length column, shape (segment_count + 1,)."""
        return self._lengths

    @property
    def segment_count(self) -> int:
        """int: Number of linear pieces in the table."""
        return self._segment_count

    @property
    def total_length(self) -> float:
        """float: Approximated length of the whole curve."""
        return self._total_length

    def __len__(self) -> int:
        return len(self._lengths)

    def clamp_length(self, length: float) -> float:
        """Clamp a length into [0, total_length].

        Raises:
            ValueError: If length is NaN.
        """
        length = float(length)
        if math.isnan(length):
            raise ValueError("length must not be NaN")
        return min(max(length, 0.0), self._total_length)

    def _interpolate_index(self, prev_index: int, wanted_length: float) -> float:
        """Fractional sample index of wanted_length between prev_index and prev_index + 1."""
        prev_length = self._lengths[prev_index]
        span = self._lengths[prev_index + 1] - prev_length
        if span <= 0.0:
            return float(prev_index)
        return prev_index + float((wanted_length - prev_length) / span)

    def index_at_length(self, length: float) -> float:
        """Map a length to a fractional sample index using binary search.

        Lengths outside [0, total_length] are clamped.

        Args:
            length: Distance traveled along the curve from its start

        Returns:
            float: Fractional index in [0, segment_count]
        """
        wanted = self.clamp_length(length)
        index = int(np.searchsorted(self._lengths, wanted, side="left"))
        if self._lengths[index] == wanted:
            return float(index)
        # lengths[index - 1] < wanted < lengths[index]
        return self._interpolate_index(index - 1, wanted)

    def parameter_at_length(self, length: float) -> float:
        """Native curve parameter in [0, 1] at which the given length has been traveled."""
        return self.index_at_length(length) / self._segment_count

    def parameters_at_lengths(
        self, lengths: Union[Sequence[float], NDArray[np.float64]]
    ) -> NDArray[np.float64]:
        """Map non-decreasing lengths to native parameters with a single forward scan.

        Equivalent to calling parameter_at_length for each entry, but the table
        cursor only moves forward, so the whole batch costs O(n + segment_count).

        Args:
            lengths: Non-decreasing sequence of lengths, clamped like parameter_at_length

        Returns:
            NDArray[np.float64] of parameters, same size as lengths

        Raises:
            ValueError: If lengths is not one-dimensional or decreases somewhere.
        """
        wanted_lengths = np.asarray(lengths, dtype=np.float64)
        if wanted_lengths.ndim != 1:
            raise ValueError(f"lengths must be one-dimensional, got {wanted_lengths.ndim} dimensions")
        if np.any(np.diff(wanted_lengths) < 0.0):
            raise ValueError("lengths must be non-decreasing for a forward scan")

        result = np.empty(len(wanted_lengths), dtype=np.float64)
        table_lengths = self._lengths
        last_index = self._segment_count
        cursor = 0

        for i, length in enumerate(wanted_lengths):
            wanted = self.clamp_length(length)
            # Advance to the first sample whose length reaches wanted
            while cursor < last_index and table_lengths[cursor] < wanted:
                cursor += 1
            if table_lengths[cursor] == wanted:
                index = float(cursor)
            else:
                index = self._interpolate_index(cursor - 1, wanted)
            result[i] = index / self._segment_count

        return result

    def length_at_parameter(self, t: float) -> float:
        """Cumulative length at parameter t, linearly interpolated and clamped to [0, 1].

        Raises:
            ValueError: If t is NaN.
        """
        t = float(t)
        if math.isnan(t):
            raise ValueError("t must not be NaN")
        position = min(max(t, 0.0), 1.0) * self._segment_count
        if position >= self._segment_count:
            return self._total_length
        index = min(int(math.floor(position)), self._segment_count - 1)
        fraction = position - index
        return float(self._lengths[index] + fraction * (self._lengths[index + 1] - self._lengths[index]))

    def __repr__(self) -> str:
        return f"ArcLengthTable(segment_count={self._segment_count}, total_length={self._total_length})"
