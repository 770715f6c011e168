"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )

def segment_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Length of each straight segment between consecutive points."""
    if len(points) < 2:
        return np.empty(0)
    diffs = np.diff(points, axis=0)
    return np.hypot(diffs[:, 0], diffs[:, 1])


def polyline_length(points: NDArray[np.float64]) -> float:
    """Total length of the polyline through the points."""
    return float(np.sum(segment_lengths(points)))
