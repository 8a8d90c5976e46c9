"""
Calibration workflow

Caller-side orchestration of the stateless core:

    solve -> filter raw samples -> re-solve on the retained set -> apply

Each filter pass starts again from the full input set with the latest
solution, so passes refine the selection rather than shrink it.
"""

from dataclasses import dataclass
import logging

from .correction import (
    apply_correction,
    compute_radius_statistics,
    deviation_mask,
)
from .data_structures import RadiusStatistics, SolvedResult
from .errors import EmptyInputError
from .samples import SampleSet
from .solver import solve
from ..utils.constants import (
    FILTER_SPACE_RAW,
    FILTER_SPACE_CORRECTED,
    FILTER_SPACES,
    ORIGIN,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalibrationReport:
    """
    Everything a presentation layer shows after a calibration run

    Attributes:
        result: final SolvedResult
        samples: raw samples the final solve used
        corrected: those samples after correction
        raw_statistics: raw distances from the solved bias
        corrected_statistics: corrected distances from the origin
        discarded: number of input samples dropped by the filter
    """
    result: SolvedResult
    samples: SampleSet
    corrected: SampleSet
    raw_statistics: RadiusStatistics
    corrected_statistics: RadiusStatistics
    discarded: int


def calibrate(samples, allowed_deviation_factor=None, iterations=1,
              config=None, filter_space=FILTER_SPACE_RAW):
    """
    Solve, optionally filter and re-solve, then apply the correction

    Args:
        samples: SampleSet of raw readings
        allowed_deviation_factor: deviation filter factor; None skips filtering
        iterations: number of filter / re-solve passes
        config: SolverConfig for every solve
        filter_space: "raw" measures raw distances from the bias,
            "corrected" measures corrected distances from the origin

    Returns:
        CalibrationReport

    Raises:
        EmptyInputError: if samples is empty
        DegenerateFitError, NumericalInstabilityError: from solve()
    """
    if samples.is_empty:
        raise EmptyInputError("cannot calibrate an empty sample set")
    if iterations < 0:
        raise ValueError("iterations must be >= 0")
    if filter_space not in FILTER_SPACES:
        raise ValueError(f"filter_space must be one of {FILTER_SPACES}, got {filter_space!r}")

    result = solve(samples, config)
    retained = samples

    if allowed_deviation_factor is not None:
        for iteration in range(iterations):
            if filter_space == FILTER_SPACE_CORRECTED:
                mask = deviation_mask(apply_correction(samples, result), ORIGIN,
                                      allowed_deviation_factor)
            else:
                mask = deviation_mask(samples, result.bias, allowed_deviation_factor)
            retained = samples.select(mask)
            logger.debug("Filter pass %d kept %d of %d samples",
                         iteration + 1, len(retained), len(samples))
            result = solve(retained, config)

    corrected = apply_correction(retained, result)

    return CalibrationReport(
        result=result,
        samples=retained,
        corrected=corrected,
        raw_statistics=compute_radius_statistics(retained, result.bias),
        corrected_statistics=compute_radius_statistics(corrected, ORIGIN),
        discarded=len(samples) - len(retained),
    )
