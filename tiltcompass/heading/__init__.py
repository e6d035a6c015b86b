"""
Compass heading, elevation and roll from device orientation.

Modules:
    types: Sample, extracted angles, configuration and result structures
    extraction: Reference vector transformation and angle extraction
    display: Heading range normalization, compass labels, formatting
    pipeline: One-call processing of a complete sensor reading

Example:
    >>> from tiltcompass.heading import OrientationSample, compute_orientation
    >>> reading = compute_orientation(OrientationSample(30.0, 20.0, 10.0))
    >>> reading.direction
    'NW'
"""

from .types import (
    ExtractedAngles,
    HeadingMethod,
    OrientationConfig,
    OrientationReading,
    OrientationSample,
)
from .extraction import (
    DEFAULT_DEGENERATE_TOLERANCE,
    calculate_orientation_angles,
    elevation_from_vector,
    heading_from_vector,
    is_gimbal_locked,
    roll_from_vector,
    transform_reference_vectors,
    worked_example_north_vector,
)
from .display import (
    COMPASS_DIRECTIONS,
    INDETERMINATE_LABEL,
    MISSING_VALUE,
    compass_direction,
    format_angle,
    format_reading,
    normalize_heading_range,
)
from .pipeline import compass_heading, compute_orientation

__all__ = [
    # Types
    'ExtractedAngles',
    'HeadingMethod',
    'OrientationConfig',
    'OrientationReading',
    'OrientationSample',
    # Extraction
    'DEFAULT_DEGENERATE_TOLERANCE',
    'calculate_orientation_angles',
    'elevation_from_vector',
    'heading_from_vector',
    'is_gimbal_locked',
    'roll_from_vector',
    'transform_reference_vectors',
    'worked_example_north_vector',
    # Display
    'COMPASS_DIRECTIONS',
    'INDETERMINATE_LABEL',
    'MISSING_VALUE',
    'compass_direction',
    'format_angle',
    'format_reading',
    'normalize_heading_range',
    # Pipeline
    'compass_heading',
    'compute_orientation',
]
