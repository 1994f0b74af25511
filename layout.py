# layout.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from config import DEFAULT_RESOLUTION, NET_PADDING


@dataclass(frozen=True)
class LayoutStats:
    width: float
    height: float
    centroid: np.ndarray        # (3,)
    lower: np.ndarray           # (2,) min x, min y
    upper: np.ndarray           # (2,) max x, max y

    @property
    def size(self) -> float:
        return max(self.width, self.height)


def _as_points(points) -> np.ndarray:
    P = np.asarray(points, dtype=np.float64)
    return P.reshape(-1, P.shape[-1]) if P.size else np.zeros((0, 3))


def find_extents(points) -> tuple[float, float]:
    """Axis-aligned width and height (max - min of x and y)."""
    P = _as_points(points)
    if P.shape[0] == 0:
        return 0.0, 0.0
    span = P[:, :2].max(axis=0) - P[:, :2].min(axis=0)
    return float(span[0]), float(span[1])


def find_centroid(points) -> np.ndarray:
    """Arithmetic mean of all points (not of triangle centroids)."""
    P = _as_points(points)
    if P.shape[0] == 0:
        return np.zeros(P.shape[1])
    return P.mean(axis=0)


def layout_stats(points) -> LayoutStats:
    P = _as_points(points)
    if P.shape[0] == 0:
        return LayoutStats(0.0, 0.0, np.zeros(P.shape[1]), np.zeros(2), np.zeros(2))
    lower = P[:, :2].min(axis=0)
    upper = P[:, :2].max(axis=0)
    width, height = upper - lower
    return LayoutStats(float(width), float(height), P.mean(axis=0), lower, upper)


def normalize_net(
    points,
    resolution: int = DEFAULT_RESOLUTION,
    padding: float = NET_PADDING,
) -> np.ndarray:
    """
    Center the net on its centroid and scale it so its larger extent spans
    `resolution - padding`. A zero-sized net is only centered.
    """
    P = _as_points(points)
    stats = layout_stats(P)
    scale = (resolution - padding) / stats.size if stats.size > 0 else 1.0
    return (P - stats.centroid) * scale
