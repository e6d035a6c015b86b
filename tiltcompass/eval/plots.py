"""
Visualization Utilities for Device Orientation.

This module draws device frames in 3D so the rotation built from the raw
sensor reading and the one rebuilt from extracted angles can be compared
side by side.

All functions return matplotlib Figure objects for flexible display/saving.
"""

from pathlib import Path
from typing import List, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from tiltcompass.heading.display import INDETERMINATE_LABEL, format_angle
from tiltcompass.heading.types import OrientationReading
from tiltcompass.utils.linalg import as_matrix3


# Device axes: x (right edge) red, y (top edge) green, z (out of screen) blue
AXIS_COLORS = ("red", "green", "blue")
AXIS_LABELS = ("x", "y", "z")

SAVE_FORMATS = ("png", "svg", "pdf")
RASTER_DPI = 150


def plot_device_frame(ax, matrix: np.ndarray, title: str) -> None:
    """
    Draw the device axes rotated into the Earth frame on a 3D axis.

    Column i of ``matrix`` is device axis i expressed in Earth coordinates.
    A NaN matrix (gimbal lock) is drawn as an empty frame with a note.

    Args:
        ax: Matplotlib 3D axis (``projection='3d'``)
        matrix: Device rotation matrix, shape (3, 3)
        title: Axis title
    """
    R = as_matrix3(matrix)

    # Earth reference axes
    for direction, label in zip(np.eye(3), ("E", "N", "U")):
        ax.plot(
            [0.0, 1.3 * direction[0]],
            [0.0, 1.3 * direction[1]],
            [0.0, 1.3 * direction[2]],
            color="gray",
            linewidth=0.8,
            linestyle="--",
        )
        ax.text(*(1.4 * direction), label, color="gray")

    if np.all(np.isfinite(R)):
        for i, (color, label) in enumerate(zip(AXIS_COLORS, AXIS_LABELS)):
            axis = R[:, i]
            ax.quiver(0.0, 0.0, 0.0, axis[0], axis[1], axis[2], color=color, linewidth=2)
            ax.text(*(1.1 * axis), label, color=color)
    else:
        ax.text(0.0, 0.0, 0.0, INDETERMINATE_LABEL, ha="center")

    ax.set_xlim(-1.5, 1.5)
    ax.set_ylim(-1.5, 1.5)
    ax.set_zlim(-1.5, 1.5)
    ax.set_xlabel("East")
    ax.set_ylabel("North")
    ax.set_zlabel("Up")
    ax.set_title(title, fontsize=12, fontweight="bold")


def plot_orientation_comparison(reading: OrientationReading) -> plt.Figure:
    """
    Side-by-side 3D plot of the device frame and its reconstruction.

    Args:
        reading: Pipeline result for one sample

    Returns:
        fig: Matplotlib figure with two 3D axes
    """
    fig = plt.figure(figsize=(12, 6))

    ax_device = fig.add_subplot(1, 2, 1, projection="3d")
    plot_device_frame(ax_device, reading.device_matrix, "Sensor rotation")

    ax_rebuilt = fig.add_subplot(1, 2, 2, projection="3d")
    plot_device_frame(ax_rebuilt, reading.reconstructed_matrix, "Rebuilt from angles")

    angles = reading.angles
    fig.suptitle(
        f"heading {format_angle(angles.heading)}  "
        f"elevation {format_angle(angles.elevation)}  "
        f"roll {format_angle(angles.roll)}",
        fontsize=14,
    )

    plt.tight_layout()
    return fig


def figure_name(reading: OrientationReading) -> str:
    """Default base filename for a reading's frame plot, e.g. ``frames_a30.0_b20.0_g-10.5``."""
    sample = reading.sample
    return f"frames_a{sample.alpha:.1f}_b{sample.beta:.1f}_g{sample.gamma:.1f}"


def save_figure(
    fig: plt.Figure,
    out_dir: Union[str, Path],
    name: str,
    formats: Tuple[str, ...] = ("png",),
) -> List[Path]:
    """
    Write a frame plot to ``out_dir/name.<fmt>`` for each requested format.

    Raster output is written at ``RASTER_DPI``; vector formats ignore it.
    All formats are checked before anything is written, so an unsupported
    one leaves the directory untouched.

    Raises:
        ValueError: If a format is not one of ``SAVE_FORMATS`` or none is given.
    """
    unknown = [fmt for fmt in formats if fmt not in SAVE_FORMATS]
    if unknown or not formats:
        raise ValueError(
            f"Unsupported figure format(s) {unknown or list(formats)}, "
            f"expected one or more of {SAVE_FORMATS}"
        )

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = [out_dir / f"{name}.{fmt}" for fmt in dict.fromkeys(formats)]
    for path in paths:
        fig.savefig(path, format=path.suffix[1:], dpi=RASTER_DPI, bbox_inches="tight")
    return paths
