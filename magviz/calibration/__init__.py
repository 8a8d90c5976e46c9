"""
Magnetometer Calibration
========================

Fits an ellipsoid to raw magnetometer samples and maps it onto a sphere.

>>> from magviz.calibration import SampleSet, solve, apply_correction
>>> result = solve(samples)
>>> corrected = apply_correction(samples, result)

The hard-iron bias is ``result.bias`` and the soft-iron correction matrix
is ``result.matrix``; ``corrected = matrix @ (raw - bias)``.
"""

from .samples import Sample, SampleSet
from .data_structures import SolvedResult, RadiusStatistics
from .config import SolverConfig
from .errors import (
    CalibrationError,
    DegenerateFitError,
    NumericalInstabilityError,
    EmptyInputError,
)
from .solver import solve
from .correction import (
    apply_correction,
    compute_radius_statistics,
    deviation_mask,
    filter_by_deviation,
)
from .workflow import CalibrationReport, calibrate


__all__ = [
    "Sample",
    "SampleSet",
    "SolvedResult",
    "RadiusStatistics",
    "SolverConfig",
    "CalibrationError",
    "DegenerateFitError",
    "NumericalInstabilityError",
    "EmptyInputError",
    "solve",
    "apply_correction",
    "compute_radius_statistics",
    "deviation_mask",
    "filter_by_deviation",
    "CalibrationReport",
    "calibrate",
]
