"""
Evaluation Metrics for Orientation Readings.

This module provides functions to compare headings and to summarize how
faithfully extracted angles reproduce the original device rotation over
a batch of readings.
"""

from typing import Dict, Iterable, Union

import numpy as np

from tiltcompass.heading.types import OrientationReading


def heading_difference(
    heading1: Union[float, np.ndarray],
    heading2: Union[float, np.ndarray],
) -> Union[float, np.ndarray]:
    """
    Shortest signed difference heading1 - heading2 in degrees.

    Headings either side of north compare as close: 359 vs 1 is -2, not
    358.

    Args:
        heading1: First heading(s) in degrees.
        heading2: Second heading(s) in degrees.

    Returns:
        Difference wrapped to [-180, 180].

    Example:
        >>> float(heading_difference(359.0, 1.0))
        -2.0
    """
    diff = np.deg2rad(np.asarray(heading1, dtype=np.float64) - np.asarray(heading2, dtype=np.float64))
    wrapped = np.rad2deg(np.arctan2(np.sin(diff), np.cos(diff)))
    if np.ndim(wrapped) == 0:
        return float(wrapped)
    return wrapped


def compute_round_trip_stats(readings: Iterable[OrientationReading]) -> Dict[str, float]:
    """
    Summarize reconstruction error over a batch of readings.

    Degenerate readings (gimbal lock) have no reconstruction and are only
    counted.

    Args:
        readings: Pipeline results.

    Returns:
        stats: Dictionary with keys:
               - 'count': Number of readings
               - 'degenerate': Number of readings in gimbal lock
               - 'mean': Mean round-trip error (NaN if none valid)
               - 'rmse': Root mean square round-trip error
               - 'p95': 95th percentile
               - 'max': Maximum round-trip error
    """
    readings = list(readings)
    errors = np.array(
        [r.round_trip_error for r in readings if not r.is_degenerate],
        dtype=np.float64,
    )

    stats = {
        "count": float(len(readings)),
        "degenerate": float(len(readings) - errors.size),
    }

    if errors.size == 0:
        stats.update({"mean": np.nan, "rmse": np.nan, "p95": np.nan, "max": np.nan})
        return stats

    stats.update({
        "mean": float(np.mean(errors)),
        "rmse": float(np.sqrt(np.mean(errors**2))),
        "p95": float(np.percentile(errors, 95)),
        "max": float(np.max(errors)),
    })

    return stats
