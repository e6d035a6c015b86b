"""
Evaluation and Visualization Module.

This module provides round-trip metrics and plotting utilities for
orientation readings.

Modules:
    metrics: Heading differences and reconstruction error statistics
    plots: Side-by-side 3D views of the device and reconstructed frames
"""

from .metrics import compute_round_trip_stats, heading_difference
from .plots import (
    SAVE_FORMATS,
    figure_name,
    plot_device_frame,
    plot_orientation_comparison,
    save_figure,
)

__all__ = [
    # Metrics
    "heading_difference",
    "compute_round_trip_stats",
    # Plots
    "plot_device_frame",
    "plot_orientation_comparison",
    "figure_name",
    "save_figure",
    "SAVE_FORMATS",
]
