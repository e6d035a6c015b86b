"""Frame convention and device reference vectors.

Two frames are involved in every reading:
- Earth: Local tangent plane fixed to the ground (x=East, y=North, z=Up)
- Device: Frame attached to the phone/tablet (x=right edge, y=top edge,
  z=out of the screen towards the user)

A rotation matrix R from the sensor maps device-frame vectors into the
Earth frame: v_earth = R @ v_device. The compass angles are read off two
device directions carried through R, defined here.

Reference: W3C DeviceOrientation Event Specification, Section 4.1
"""

from typing import Tuple

import numpy as np
from numpy.typing import NDArray


# Device-frame direction treated as "north": out of the back of the device,
# i.e. where the rear camera looks. Sign follows the negated third column of
# the W3C rotation matrix.
DEVICE_NORTH: Tuple[float, float, float] = (0.0, 0.0, -1.0)

# Device-frame direction treated as "east": the device's right edge.
DEVICE_EAST: Tuple[float, float, float] = (1.0, 0.0, 0.0)


def reference_vectors() -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return fresh copies of the device-frame north and east vectors.

    Returns:
        Tuple (north, east), each a float64 array of shape (3,).
    """
    return (
        np.array(DEVICE_NORTH, dtype=np.float64),
        np.array(DEVICE_EAST, dtype=np.float64),
    )
