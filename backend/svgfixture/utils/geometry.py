"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def segment_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Euclidean length of each consecutive segment of an Nx2 point sequence."""
    diffs = np.diff(points, axis=0)
    return np.hypot(diffs[:, 0], diffs[:, 1])


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    if len(points) == 0:
        return np.empty(0)
    return np.concatenate([[0.0], np.cumsum(segment_lengths(points))])


def identity_transform() -> NDArray[np.float64]:
    return np.eye(4)


def as_transform(matrix: NDArray[np.float64] | list[list[float]] | None) -> NDArray[np.float64]:
    """Validate a caller transform as a 4x4 affine matrix. None means identity."""
    if matrix is None:
        return identity_transform()
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError(f"Transform must be a 4x4 matrix, got shape {m.shape}")
    return m


def apply_transform(transform: NDArray[np.float64], xy: NDArray[np.float64]) -> NDArray[np.float64]:
    """Lift Nx2 positions to z=0 and map them through a 4x4 affine transform -> Nx3."""
    if len(xy) == 0:
        return np.empty((0, 3))
    homogeneous = np.column_stack([xy[:, 0], xy[:, 1], np.zeros(len(xy)), np.ones(len(xy))])
    mapped = homogeneous @ transform.T
    return mapped[:, :3]


def translation(x: float, y: float, z: float = 0.0) -> NDArray[np.float64]:
    m = identity_transform()
    m[:3, 3] = (x, y, z)
    return m
