import numpy as np
from typing import Tuple


def locate_segments(positions: np.ndarray, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Find the bracketing segment of every query position.

    Args:
        positions: Ascending control point positions, shape (N,), N >= 2
        t: Query positions, already clamped to [positions[0], positions[-1]]

    Returns:
        (index, u, degenerate): left point index of each segment, the local
        parameter in [0, 1], and whether the segment has zero length.
        Queries that land exactly on tied positions resolve to the last
        point at that position.
    """
    n = positions.shape[0]
    index = np.searchsorted(positions, t, side="right") - 1
    index = np.clip(index, 0, n - 2)

    left = positions[index]
    length = positions[index + 1] - left
    degenerate = length <= 0.0
    u = np.where(degenerate, 0.0, (t - left) / np.where(degenerate, 1.0, length))

    # the last position belongs to the last point, even when tied
    at_end = t >= positions[-1]
    index = np.where(at_end, n - 2, index)
    u = np.where(at_end, 1.0, u)
    degenerate = degenerate & ~at_end
    return index, np.clip(u, 0.0, 1.0), degenerate
