"""Central module containing constants, types and errors for arc-length parametrization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

###############################################################################
# Types
###############################################################################


PointLike = Union[Sequence[float], NDArray[np.float64]]  # a single point (x, y) or (x, y, z)

ControlPointsLike = Union[Sequence[PointLike], NDArray[np.float64]]  # P0, P1, P2, P3


###############################################################################
# Enums and Consts
###############################################################################


# Number of linear segments of the cumulative arc length table (SEGMENT_COUNT + 1 samples)
SEGMENT_COUNT: int = 100


@dataclass(frozen=True)
class ArcLengthConfig:
    """Settings for building an arc length table.

    Attributes:
        segment_count: Number of equal parameter steps used to approximate the
            cumulative arc length. The table holds segment_count + 1 samples.
    """

    segment_count: int = SEGMENT_COUNT

    def __post_init__(self):
        if isinstance(self.segment_count, bool) or not isinstance(self.segment_count, (int, np.integer)):
            raise ValueError(f"segment_count must be an integer, got {type(self.segment_count).__name__}")
        if self.segment_count < 1:
            raise ValueError(f"segment_count must be at least 1, got {self.segment_count}")

    def to_dict(self) -> dict:
        """Convert the config to a dictionary."""
        return {"segment_count": int(self.segment_count)}

    @classmethod
    def from_dict(cls, data: dict) -> ArcLengthConfig:
        """Create an ArcLengthConfig from a dictionary."""
        return cls(segment_count=data.get("segment_count", SEGMENT_COUNT))


DEFAULT_ARC_LENGTH_CONFIG = ArcLengthConfig()


###############################################################################
# Errors
###############################################################################


class ArcParamError(Exception):
    """Base exception for arc-length parametrization errors."""


class InvalidControlPointsError(ArcParamError, ValueError):
    """Raised when control points are not four finite points of equal dimension."""


class InvalidSampleCountError(ArcParamError, ValueError):
    """Raised when fewer than two sample points are requested."""


###############################################################################
# Functions
###############################################################################


def main() -> None:
    """Display the default arc length settings."""
    print("SEGMENT_COUNT:", SEGMENT_COUNT)
    print("DEFAULT_ARC_LENGTH_CONFIG:", DEFAULT_ARC_LENGTH_CONFIG.to_dict())
    print()


if __name__ == "__main__":
    main()
