"""
Coordinate transformations for display

Raw magnetometer clouds and corrected unit-sphere clouds differ in scale by
orders of magnitude; both are normalized to a fixed radius before
rendering so the camera does not have to move.
"""

import numpy as np

from ..calibration.errors import EmptyInputError
from ..calibration.samples import SampleSet
from ..utils.constants import DEFAULT_TARGET_RADIUS


def normalize_to_radius(samples, target_radius=DEFAULT_TARGET_RADIUS):
    """
    Scale a cloud so its farthest point from the origin is at target_radius

    Args:
        samples: SampleSet
        target_radius: distance of the farthest point after scaling

    Returns:
        SampleSet: scaled samples; unchanged if every point is at the origin

    Raises:
        EmptyInputError: if samples is empty
        ValueError: if target_radius is not positive
    """
    if samples.is_empty:
        raise EmptyInputError("cannot normalize an empty sample set")
    if target_radius <= 0.0:
        raise ValueError("target_radius must be > 0")

    max_radius = float(np.max(np.linalg.norm(samples.points, axis=1)))
    if max_radius == 0.0:
        return SampleSet(samples)

    return SampleSet(samples.points * (target_radius / max_radius))
