"""
Apply a solved calibration and filter outliers

- apply_correction: corrected = matrix @ (raw - bias)
- compute_radius_statistics: mean / max / stddev of distances to a center
- filter_by_deviation: drop samples whose distance strays from the mean
"""

import logging

import numpy as np

from .data_structures import RadiusStatistics
from .errors import EmptyInputError
from .samples import SampleSet, as_vector3

logger = logging.getLogger(__name__)


def apply_correction(samples, result):
    """
    Apply hard-iron and soft-iron correction to raw samples

    Args:
        samples: SampleSet of raw readings
        result: SolvedResult from solve()

    Returns:
        SampleSet: corrected samples, same order as the input
    """
    centered = samples.points - result.bias
    return SampleSet(centered @ result.matrix.T)


def radial_distances(samples, center):
    """Euclidean distance of every sample from center"""
    center = as_vector3(center, "center")
    return np.linalg.norm(samples.points - center, axis=1)


def compute_radius_statistics(samples, center):
    """
    Distance statistics of a sample cloud

    Args:
        samples: SampleSet (raw or corrected)
        center: 3-vector the distances are measured from

    Returns:
        RadiusStatistics

    Raises:
        EmptyInputError: if samples is empty
    """
    if samples.is_empty:
        raise EmptyInputError("radius statistics need at least one sample")

    distances = radial_distances(samples, center)
    if distances.size > 1:
        stddev = float(np.std(distances, ddof=1))
    else:
        stddev = 0.0

    return RadiusStatistics(
        count=int(distances.size),
        mean=float(np.mean(distances)),
        max=float(np.max(distances)),
        standard_deviation=stddev,
    )


def deviation_mask(samples, center, allowed_deviation_factor):
    """
    Boolean mask of the samples that pass the deviation filter

    A sample passes when
        |distance - mean| <= allowed_deviation_factor * standard_deviation

    Raises:
        EmptyInputError: if samples is empty
    """
    stats = compute_radius_statistics(samples, center)
    allowed = allowed_deviation_factor * stats.standard_deviation
    distances = radial_distances(samples, center)
    return np.abs(distances - stats.mean) <= allowed


def filter_by_deviation(samples, center, allowed_deviation_factor):
    """
    Drop samples whose distance from center deviates too far from the mean

    The comparison is inclusive. A factor <= 0 may leave nothing, which is
    returned as an empty SampleSet rather than raised.

    Args:
        samples: SampleSet
        center: 3-vector, usually the solved bias for raw samples
        allowed_deviation_factor: allowed deviation in standard deviations

    Returns:
        SampleSet: retained samples in their original order

    Raises:
        EmptyInputError: if samples is empty
    """
    mask = deviation_mask(samples, center, allowed_deviation_factor)
    retained = samples.select(mask)
    logger.debug("Deviation filter (factor %s) kept %d of %d samples",
                 allowed_deviation_factor, len(retained), len(samples))
    return retained
